"""Graph IR: wraps the abstract node/edge model in a networkx MultiDiGraph.

This module owns the canonical graph structure read by every layout phase.
Nodes keep their declaration order and parallel edges are stored as separate
edges, each tagged with its declaration index so adjacency queries come back
in input order. The IR is built once per loaded graph and never mutated by
the layout engine.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import networkx as nx

from dag_layout.errors import GraphFormatError


@dataclass(frozen=True)
class NodeData:
    id: str
    kind: str = ""
    height_hint: float | None = None
    label: str = ""


@dataclass(frozen=True)
class EdgeData:
    source: str
    target: str
    index: int = 0


class GraphIR:
    """The graph intermediate representation consumed by the layout engine.

    Wraps a networkx MultiDiGraph and exposes helpers for topology queries.
    """

    def __init__(self, digraph: nx.MultiDiGraph, dropped_edges: int = 0) -> None:
        self.digraph = digraph
        self.dropped_edges = dropped_edges

    @classmethod
    def from_lists(cls, nodes: Iterable[NodeData], edges: Iterable[EdgeData | tuple[str, str]]) -> GraphIR:
        """Build a GraphIR from node and edge records.

        A repeated node id keeps its first declaration. Edges that reference an
        undeclared node are dropped and counted in ``dropped_edges``.
        """
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for node in nodes:
            _add_node_if_absent(digraph, node)

        dropped = 0
        index = 0
        for edge in edges:
            source, target = (edge.source, edge.target) if isinstance(edge, EdgeData) else edge
            if source not in digraph or target not in digraph:
                dropped += 1
                continue
            digraph.add_edge(source, target, data=EdgeData(source=source, target=target, index=index))
            index += 1

        return cls(digraph=digraph, dropped_edges=dropped)

    @classmethod
    def from_mappings(cls, nodes: Iterable[Mapping], edges: Iterable[Mapping | tuple[str, str]]) -> GraphIR:
        """Build a GraphIR from plain dicts such as ``{"id": ..., "kind": ...}``."""
        node_records = [node_from_mapping(n, where=f"nodes[{i}]") for i, n in enumerate(nodes)]
        edge_records = [_edge_from_record(e, where=f"edges[{i}]") for i, e in enumerate(edges)]
        return cls.from_lists(node_records, edge_records)

    def node(self, node_id: str) -> NodeData:
        return self.digraph.nodes[node_id]["data"]

    def node_ids(self) -> list[str]:
        return list(self.digraph.nodes)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)

    def predecessors(self, node_id: str) -> list[str]:
        """Source ids of every incoming edge, one entry per edge, in input order."""
        if node_id not in self.digraph:
            return []
        incoming = sorted(self.digraph.in_edges(node_id, data="data"), key=lambda e: e[2].index)
        return [src for src, _, _ in incoming]

    def successors(self, node_id: str) -> list[str]:
        """Target ids of every outgoing edge, one entry per edge, in input order."""
        if node_id not in self.digraph:
            return []
        outgoing = sorted(self.digraph.out_edges(node_id, data="data"), key=lambda e: e[2].index)
        return [tgt for _, tgt, _ in outgoing]

    def edges(self) -> list[EdgeData]:
        """All edges in declaration order."""
        return sorted((d for _, _, d in self.digraph.edges(data="data")), key=lambda e: e.index)

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)

    def find_cycle(self) -> list[tuple[str, str]] | None:
        """Return one directed cycle as a list of (source, target) pairs, or None."""
        try:
            cycle = nx.find_cycle(self.digraph, orientation="original")
        except nx.NetworkXNoCycle:
            return None
        return [(src, tgt) for src, tgt, *_ in cycle]


def node_from_mapping(mapping: Mapping, where: str = "node") -> NodeData:
    """Build a NodeData from a dict; ``type`` is accepted for ``kind``.

    Raises GraphFormatError naming ``where`` when ``id`` is missing or the
    height hint is not a number.
    """
    if not isinstance(mapping, Mapping) or "id" not in mapping:
        raise GraphFormatError(f"{where} must be a mapping with an 'id'")
    kind = mapping.get("kind", mapping.get("type", ""))
    hint = mapping.get("heightHint", mapping.get("height"))
    if hint is not None and (isinstance(hint, bool) or not isinstance(hint, (int, float))):
        raise GraphFormatError(f"{where}.heightHint must be a number, got {hint!r}")
    return NodeData(
        id=str(mapping["id"]),
        kind=str(kind) if kind is not None else "",
        height_hint=float(hint) if hint is not None else None,
        label=str(mapping.get("label", mapping["id"])),
    )


def _edge_from_record(record: Mapping | tuple[str, str], where: str) -> tuple[str, str]:
    if isinstance(record, Mapping):
        if "source" not in record or "target" not in record:
            raise GraphFormatError(f"{where} needs both 'source' and 'target'")
        return str(record["source"]), str(record["target"])
    try:
        source, target = record
    except (TypeError, ValueError) as e:
        raise GraphFormatError(f"{where} must be a mapping or a (source, target) pair") from e
    return str(source), str(target)


def _add_node_if_absent(digraph: nx.MultiDiGraph, node: NodeData) -> None:
    if node.id not in digraph:
        digraph.add_node(node.id, data=node)
