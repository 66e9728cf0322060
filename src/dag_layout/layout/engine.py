"""Layout engine convenience functions."""

from __future__ import annotations

from dag_layout.config import LayoutConfig
from dag_layout.ir.graph import GraphIR
from dag_layout.layout.sugiyama import SugiyamaLayout
from dag_layout.layout.types import LayoutResult


def full_layout(gir: GraphIR) -> LayoutResult:
    """Run the full layout pipeline with the default configuration."""
    return full_layout_with_config(gir, LayoutConfig())


def full_layout_with_config(gir: GraphIR, config: LayoutConfig, strict: bool = False) -> LayoutResult:
    """Run the layered layout pipeline with an explicit configuration."""
    engine = SugiyamaLayout(config)
    return engine.layout(gir, strict=strict)
