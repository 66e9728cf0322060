"""Serialise a LayoutResult for renderer collaborators."""

from __future__ import annotations

import json

from dag_layout.layout.types import LayoutResult


def to_dict(result: LayoutResult) -> dict:
    """Convert a layout result into plain JSON-compatible data."""
    positions = {
        node_id: {
            "x": n.x,
            "y": n.y,
            "width": n.width,
            "height": n.height,
            "layer": n.layer,
            "order": n.order,
        }
        for node_id, n in result.nodes.items()
    }
    cycle = None
    if result.cycle is not None:
        cycle = {
            "unresolved": list(result.cycle.unresolved),
            "edges": [list(edge) for edge in result.cycle.cycle],
        }
    return {
        "positions": positions,
        "canvas": {"width": result.canvas.width, "height": result.canvas.height},
        "layers": [list(layer) for layer in result.ordering],
        "crossings": result.crossings,
        "droppedEdges": result.dropped_edges,
        "cycle": cycle,
    }


def to_json(result: LayoutResult, indent: int | None = 2) -> str:
    return json.dumps(to_dict(result), indent=indent)
