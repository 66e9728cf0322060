"""Line-oriented edge-list reader.

One statement per line; ``#`` starts a comment::

    x [tensor]
    x -> matmul [op, 148] -> y
    y -> z

A node token is an id optionally followed by ``[kind]`` or
``[kind, height]``. Every id mentioned declares a node, first mention wins.
"""

from __future__ import annotations

import re

from dag_layout.errors import GraphFormatError
from dag_layout.ir.graph import GraphIR, NodeData

_COMMENT_RE = re.compile(r"#.*$")
_ARROW_RE = re.compile(r"\s*->\s*")
_NODE_RE = re.compile(
    r"""^(?P<id>[A-Za-z0-9_.:/-]+)
        (?:\s*\[\s*(?P<kind>[A-Za-z0-9_-]*)\s*(?:,\s*(?P<height>\d+(?:\.\d+)?)\s*)?\])?$""",
    re.VERBOSE,
)


class EdgeListParser:
    def parse(self, src: str) -> GraphIR:
        nodes: dict[str, NodeData] = {}
        edges: list[tuple[str, str]] = []

        for lineno, raw_line in enumerate(src.splitlines(), start=1):
            line = _COMMENT_RE.sub("", raw_line).strip()
            if not line:
                continue
            chain = [_parse_node_token(tok, lineno) for tok in _ARROW_RE.split(line)]
            for node in chain:
                if node.id not in nodes:
                    nodes[node.id] = node
            for src_node, tgt_node in zip(chain, chain[1:]):
                edges.append((src_node.id, tgt_node.id))

        return GraphIR.from_lists(nodes.values(), edges)


def _parse_node_token(token: str, lineno: int) -> NodeData:
    m = _NODE_RE.match(token.strip())
    if m is None:
        raise GraphFormatError(f"line {lineno}: cannot parse node '{token.strip()}'")
    height = m.group("height")
    return NodeData(
        id=m.group("id"),
        kind=m.group("kind") or "",
        height_hint=float(height) if height is not None else None,
        label=m.group("id"),
    )
