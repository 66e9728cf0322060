"""Reader for the abstract JSON graph document.

Expected shape::

    {
      "nodes": [{"id": "a", "kind": "op", "heightHint": 148}, ...],
      "edges": [{"source": "a", "target": "b"}, ...]
    }

``type`` is accepted in place of ``kind`` and ``height`` in place of
``heightHint``. Edges naming an undeclared node are not a format error; the
GraphIR drops them.
"""

from __future__ import annotations

import json

from dag_layout.errors import GraphFormatError
from dag_layout.ir.graph import GraphIR, NodeData


class JsonGraphParser:
    def parse(self, src: str) -> GraphIR:
        try:
            doc = json.loads(src)
        except json.JSONDecodeError as e:
            raise GraphFormatError(f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e

        if not isinstance(doc, dict):
            raise GraphFormatError("graph document must be a JSON object")

        raw_nodes = doc.get("nodes", [])
        raw_edges = doc.get("edges", [])
        if not isinstance(raw_nodes, list):
            raise GraphFormatError("'nodes' must be an array")
        if not isinstance(raw_edges, list):
            raise GraphFormatError("'edges' must be an array")

        nodes = [_parse_node(i, n) for i, n in enumerate(raw_nodes)]
        edges = [_parse_edge(i, e) for i, e in enumerate(raw_edges)]
        return GraphIR.from_lists(nodes, edges)


def _parse_node(index: int, raw: object) -> NodeData:
    where = f"nodes[{index}]"
    if not isinstance(raw, dict):
        raise GraphFormatError(f"{where} must be an object")
    node_id = raw.get("id")
    if not isinstance(node_id, (str, int)) or isinstance(node_id, bool):
        raise GraphFormatError(f"{where}.id must be a string or integer")

    kind = raw.get("kind", raw.get("type", ""))
    if kind is None:
        kind = ""
    if not isinstance(kind, str):
        raise GraphFormatError(f"{where}.kind must be a string")

    hint = raw.get("heightHint", raw.get("height"))
    if hint is not None and (isinstance(hint, bool) or not isinstance(hint, (int, float))):
        raise GraphFormatError(f"{where}.heightHint must be a number")

    label = raw.get("label", str(node_id))
    return NodeData(
        id=str(node_id),
        kind=kind,
        height_hint=float(hint) if hint is not None else None,
        label=str(label),
    )


def _parse_edge(index: int, raw: object) -> tuple[str, str]:
    where = f"edges[{index}]"
    if isinstance(raw, list) and len(raw) == 2:
        source, target = raw
    elif isinstance(raw, dict):
        if "source" not in raw or "target" not in raw:
            raise GraphFormatError(f"{where} needs both 'source' and 'target'")
        source, target = raw["source"], raw["target"]
    else:
        raise GraphFormatError(f"{where} must be an object or a [source, target] pair")
    return str(source), str(target)
