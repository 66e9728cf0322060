"""dag-layout: layered left-to-right layout for directed acyclic graphs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from dag_layout.config import LayoutConfig
from dag_layout.errors import ConfigError, CycleError, DagLayoutError, GraphFormatError
from dag_layout.export import to_dict
from dag_layout.ir.graph import GraphIR
from dag_layout.layout import LayoutResult, full_layout_with_config
from dag_layout.parsers import load

__all__ = [
    "ConfigError",
    "CycleError",
    "DagLayoutError",
    "GraphFormatError",
    "GraphIR",
    "LayoutConfig",
    "LayoutResult",
    "layout_graph",
    "layout_json",
]


def layout_graph(
    nodes: Iterable[Mapping],
    edges: Iterable[Mapping | tuple[str, str]],
    config: LayoutConfig | None = None,
    strict: bool = False,
) -> LayoutResult:
    """Lay out an abstract graph given as plain node and edge records.

    Args:
        nodes: Mappings with an ``id`` and optional ``kind`` (or ``type``),
            ``heightHint`` (or ``height``) and ``label``.
        edges: Mappings with ``source`` and ``target``, or (source, target) pairs.
            Edges naming an unknown node are dropped.
        config: Layout geometry; defaults to ``LayoutConfig()``.
        strict: Raise CycleError instead of returning a degenerate layout for
            cyclic input.

    Returns:
        The LayoutResult with one positioned node per input node.
    """
    gir = GraphIR.from_mappings(nodes, edges)
    return full_layout_with_config(gir, config if config is not None else LayoutConfig(), strict=strict)


def layout_json(src: str, config: LayoutConfig | None = None, strict: bool = False) -> dict:
    """Parse a graph document (JSON or edge list), lay it out and export the result.

    Raises:
        GraphFormatError: If the input cannot be parsed.
        CycleError: If ``strict`` and the graph has a cycle.
    """
    gir = load(src)
    result = full_layout_with_config(gir, config if config is not None else LayoutConfig(), strict=strict)
    return to_dict(result)
