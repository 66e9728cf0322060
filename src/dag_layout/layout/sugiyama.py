"""Sugiyama-style layered layout engine, left-to-right flow.

Phases:
  1. Layer assignment (longest path from sources, Kahn propagation)
  2. Crossing minimization (three fixed barycenter sweeps)
  3. Coordinate assignment (top-down placement, bottom-up straightening)
  4. Canvas sizing

Every phase reads the previous phase's output and returns fresh structures,
so the whole pipeline can be re-run at any time without shared state.
"""

from __future__ import annotations

import logging
import math
from collections import deque

from dag_layout.config import LayoutConfig
from dag_layout.errors import CycleError
from dag_layout.ir.graph import GraphIR
from dag_layout.layout.types import CanvasSize, CycleDiagnostic, LayoutNode, LayoutResult

logger = logging.getLogger(__name__)


# ─── Layer Assignment ────────────────────────────────────────────────────────


class LayerAssignment:
    def __init__(self, layers: dict[str, int], layer_count: int, unresolved: list[str]) -> None:
        self.layers = layers
        self.layer_count = layer_count
        self.unresolved = unresolved

    @classmethod
    def assign(cls, gir: GraphIR) -> LayerAssignment:
        """Assign every node the length of the longest path reaching it from a source.

        ``layers`` keeps the order in which nodes first received a layer; that
        order seeds the intra-layer ordering. Nodes that never reach in-degree
        zero (members of a cycle and everything downstream of one) are listed in
        ``unresolved`` and default to layer 0 when nothing reached them.
        """
        remaining: dict[str, int] = {node_id: gir.in_degree(node_id) for node_id in gir.node_ids()}
        queue: deque[str] = deque(node_id for node_id, deg in remaining.items() if deg == 0)
        layers: dict[str, int] = {node_id: 0 for node_id in queue}

        while queue:
            node_id = queue.popleft()
            proposed = layers[node_id] + 1
            for succ in gir.successors(node_id):
                if layers.get(succ, -1) < proposed:
                    layers[succ] = proposed
                remaining[succ] -= 1
                if remaining[succ] == 0:
                    queue.append(succ)

        unresolved = [node_id for node_id, deg in remaining.items() if deg > 0]
        for node_id in unresolved:
            layers.setdefault(node_id, 0)

        layer_count = (max(layers.values()) + 1) if layers else 0
        return cls(layers=layers, layer_count=layer_count, unresolved=unresolved)


# ─── Crossing Minimization ───────────────────────────────────────────────────

# Fixed sweep schedule; not iterated to convergence.
SWEEPS: tuple[str, ...] = ("forward", "backward", "forward")


def minimise_crossings(la: LayerAssignment, gir: GraphIR) -> list[list[str]]:
    """Reorder each layer by the barycenter of its neighbours in the adjacent layer."""
    ordering: list[list[str]] = [[] for _ in range(la.layer_count)]
    for node_id, layer in la.layers.items():
        ordering[layer].append(node_id)

    preds = {node_id: gir.predecessors(node_id) for node_id in la.layers}
    succs = {node_id: gir.successors(node_id) for node_id in la.layers}
    layer_count = la.layer_count

    for sweep in SWEEPS:
        if sweep == "forward":
            for layer_idx in range(1, layer_count):
                prev = {nid: float(i) for i, nid in enumerate(ordering[layer_idx - 1])}
                ordering[layer_idx] = sorted(ordering[layer_idx], key=lambda a, p=prev: _barycenter(preds[a], p))
        else:
            for layer_idx in range(layer_count - 2, -1, -1):
                nxt = {nid: float(i) for i, nid in enumerate(ordering[layer_idx + 1])}
                ordering[layer_idx] = sorted(ordering[layer_idx], key=lambda a, n=nxt: _barycenter(succs[a], n))

    return ordering


def _barycenter(neighbors: list[str], neighbor_pos: dict[str, float]) -> float:
    positions = [neighbor_pos[nb] for nb in neighbors if nb in neighbor_pos]
    if not positions:
        return math.inf
    return sum(positions) / len(positions)


def count_crossings(ordering: list[list[str]], gir: GraphIR) -> int:
    """Count pairwise crossings between edges joining adjacent layers.

    Edges are sorted by (source position, target position); two edges cross
    exactly when their target positions are strictly inverted in that order,
    so the count is an inversion count done by merge sort.
    """
    total = 0
    for l_idx in range(len(ordering) - 1):
        tgt_pos: dict[str, int] = {nid: i for i, nid in enumerate(ordering[l_idx + 1])}
        edges: list[tuple[int, int]] = []
        for sp, src_id in enumerate(ordering[l_idx]):
            for nb in gir.successors(src_id):
                if nb in tgt_pos:
                    edges.append((sp, tgt_pos[nb]))
        edges.sort()
        _, inversions = _sort_and_count([tp for _, tp in edges])
        total += inversions
    return total


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    """Merge sort ``values``, returning the sorted list and its strict inversion count."""
    if len(values) <= 1:
        return values, 0
    mid = len(values) // 2
    left, left_inv = _sort_and_count(values[:mid])
    right, right_inv = _sort_and_count(values[mid:])
    merged: list[int] = []
    inversions = left_inv + right_inv
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


# ─── Coordinate Assignment ───────────────────────────────────────────────────


def node_height(gir: GraphIR, node_id: str, config: LayoutConfig) -> float:
    data = gir.node(node_id)
    if data.height_hint is not None and data.height_hint > 0:
        return data.height_hint
    return config.height_for(data.kind)


def assign_coordinates(ordering: list[list[str]], gir: GraphIR, config: LayoutConfig) -> list[LayoutNode]:
    """Assign (x, y) to every node.

    x is fixed per layer. y is placed top-down, each node at the mean y of its
    placed predecessors but never closer than ``vertical_step`` to the node
    above it. A bottom-up pass then pulls each node toward the mean y of its
    successors, clamped between the node above it and the already refined
    node below it, so the minimum gap survives the second pass.
    """
    step = config.vertical_step
    pad = config.padding
    ys: dict[str, float] = {}

    for layer_nodes in ordering:
        cursor = pad
        for node_id in layer_nodes:
            placed = [ys[p] for p in gir.predecessors(node_id) if p in ys]
            y = max(cursor, sum(placed) / len(placed)) if placed else cursor
            ys[node_id] = float(y)
            cursor = ys[node_id] + step

    for layer_idx in range(len(ordering) - 2, -1, -1):
        layer_nodes = ordering[layer_idx]
        below = math.inf
        for i in range(len(layer_nodes) - 1, -1, -1):
            node_id = layer_nodes[i]
            succ_ys = [ys[s] for s in gir.successors(node_id)]
            if succ_ys:
                ideal = sum(succ_ys) / len(succ_ys)
                low = pad if i == 0 else max(pad, ys[layer_nodes[i - 1]] + step)
                # low <= current y <= high holds from the top-down pass.
                high = below - step
                ys[node_id] = float(min(max(ideal, low), high))
            below = ys[node_id]

    nodes: list[LayoutNode] = []
    for layer_idx, layer_nodes in enumerate(ordering):
        x = float(pad + layer_idx * config.column_step)
        for order, node_id in enumerate(layer_nodes):
            nodes.append(
                LayoutNode(
                    id=node_id,
                    layer=layer_idx,
                    order=order,
                    x=x,
                    y=ys[node_id],
                    width=float(config.node_width),
                    height=float(node_height(gir, node_id, config)),
                    kind=gir.node(node_id).kind,
                )
            )
    return nodes


# ─── Canvas Sizing ───────────────────────────────────────────────────────────


def canvas_size(nodes: list[LayoutNode], layer_count: int, config: LayoutConfig) -> CanvasSize:
    if not nodes:
        return CanvasSize(width=0.0, height=0.0)
    width = 2 * config.padding + layer_count * config.column_step
    height = config.padding + max(n.y + n.height for n in nodes)
    return CanvasSize(width=float(width), height=float(height))


# ─── SugiyamaLayout Engine ───────────────────────────────────────────────────


class SugiyamaLayout:
    """Layered left-to-right layout engine."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config if config is not None else LayoutConfig()

    def layout(self, gir: GraphIR, strict: bool = False) -> LayoutResult:
        """Lay out ``gir``; with ``strict`` a cyclic input raises CycleError."""
        la = LayerAssignment.assign(gir)

        diagnostic: CycleDiagnostic | None = None
        if la.unresolved:
            diagnostic = CycleDiagnostic(unresolved=list(la.unresolved), cycle=gir.find_cycle() or [])
            if strict:
                raise CycleError(diagnostic)
            logger.warning("graph is not acyclic; %d node(s) fell back to a default layer", len(la.unresolved))
        if gir.dropped_edges:
            logger.warning("dropped %d edge(s) that reference undeclared nodes", gir.dropped_edges)

        ordering = minimise_crossings(la, gir)
        layout_nodes = assign_coordinates(ordering, gir, self.config)
        canvas = canvas_size(layout_nodes, la.layer_count, self.config)
        crossings = count_crossings(ordering, gir)

        logger.debug(
            "laid out %d nodes in %d layers (%d crossings, %d dropped edges)",
            len(layout_nodes),
            la.layer_count,
            crossings,
            gir.dropped_edges,
        )
        return LayoutResult(
            nodes={n.id: n for n in layout_nodes},
            canvas=canvas,
            ordering=ordering,
            crossings=crossings,
            dropped_edges=gir.dropped_edges,
            cycle=diagnostic,
        )
