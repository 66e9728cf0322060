"""Layout types shared by the layout phases and exporters."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LayoutNode:
    """A positioned node in the layout."""

    id: str
    layer: int
    order: int
    x: float
    y: float
    width: float
    height: float
    kind: str = ""


@dataclass(frozen=True)
class CanvasSize:
    width: float = 0
    height: float = 0


@dataclass
class CycleDiagnostic:
    """Report for input that is not a DAG.

    ``unresolved`` lists the nodes that never reached in-degree zero during
    layer assignment (they fall back to layer 0); ``cycle`` is one directed
    cycle found in the input, as (source, target) pairs.
    """

    unresolved: list[str]
    cycle: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class LayoutResult:
    """Self-contained layout output: everything a renderer needs."""

    nodes: dict[str, LayoutNode]
    canvas: CanvasSize
    ordering: list[list[str]] = field(default_factory=list)
    crossings: int = 0
    dropped_edges: int = 0
    cycle: CycleDiagnostic | None = None

    @property
    def layer_count(self) -> int:
        return len(self.ordering)

    def positions(self) -> dict[str, tuple[float, float, float, float]]:
        """Map node id to ``(x, y, width, height)``."""
        return {nid: (n.x, n.y, n.width, n.height) for nid, n in self.nodes.items()}
