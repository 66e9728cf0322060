"""Layout engine public API."""

from __future__ import annotations

from dag_layout.layout.engine import full_layout, full_layout_with_config
from dag_layout.layout.sugiyama import (
    SWEEPS,
    LayerAssignment,
    SugiyamaLayout,
    assign_coordinates,
    canvas_size,
    count_crossings,
    minimise_crossings,
    node_height,
)
from dag_layout.layout.types import CanvasSize, CycleDiagnostic, LayoutNode, LayoutResult

__all__ = [
    "SWEEPS",
    "CanvasSize",
    "CycleDiagnostic",
    "LayerAssignment",
    "LayoutNode",
    "LayoutResult",
    "SugiyamaLayout",
    "assign_coordinates",
    "canvas_size",
    "count_crossings",
    "full_layout",
    "full_layout_with_config",
    "minimise_crossings",
    "node_height",
]
