"""Intermediate representation: the node/edge model the layout engine reads."""

from dag_layout.ir.graph import EdgeData, GraphIR, NodeData

__all__ = [
    "EdgeData",
    "GraphIR",
    "NodeData",
]
