"""Crossing reduction for depth columns (barycenter heuristic).

Optional refinement of the grid layout: within one island, nodes of each
depth column are reordered so wires between neighbouring columns cross less.
Columns are lists of node ids; only wires between consecutive columns count,
and parallel wires between the same two components count once each.
"""

from __future__ import annotations

import networkx as nx

MAX_PASSES = 24


def minimise_crossings(levels: list[list[int]], graph: nx.MultiDiGraph) -> list[list[int]]:
    """Reorder each column to reduce edge crossings.

    Starts from the given (stable) ordering and runs alternating top-down and
    bottom-up barycenter sweeps until the crossing count stops improving or
    ``MAX_PASSES`` is hit. The best ordering seen is returned, so the result
    never has more crossings than the input. Ties keep their current order.

    Returns a new list[list[int]]; ``levels`` is left untouched.
    """
    ordering: list[list[int]] = [list(level) for level in levels]
    level_count = len(ordering)

    best_ordering = [list(level) for level in ordering]
    best = count_crossings(ordering, graph)
    if best == 0:
        return best_ordering

    for _pass in range(MAX_PASSES):
        # Top-down sweep: use predecessor positions as barycenter weights.
        for level_idx in range(1, level_count):
            prev: dict[int, float] = {nid: float(i) for i, nid in enumerate(ordering[level_idx - 1])}
            ordering[level_idx].sort(key=lambda a, p=prev: _barycenter(a, graph, p, "incoming"))

        # Bottom-up sweep: use successor positions as barycenter weights.
        for level_idx in range(max(0, level_count - 2), -1, -1):
            nxt: dict[int, float] = {nid: float(i) for i, nid in enumerate(ordering[level_idx + 1])}
            ordering[level_idx].sort(key=lambda a, n=nxt: _barycenter(a, graph, n, "outgoing"))

        new = count_crossings(ordering, graph)
        if new >= best:
            break
        best = new
        best_ordering = [list(level) for level in ordering]
        if best == 0:
            break

    return best_ordering


def _barycenter(
    node_id: int,
    graph: nx.MultiDiGraph,
    neighbor_slot: dict[int, float],
    direction: str,
) -> float:
    """Mean slot of the wires joining ``node_id`` to the adjacent column.

    direction: "incoming" follows wires into the node, "outgoing" wires out of
    it. Each parallel wire adds its own weight, so a component fed twice by
    the same neighbour is pulled harder towards it. A node with no wire into
    the adjacent column sorts last (float('inf')).
    """
    if node_id not in graph:
        return float("inf")

    if direction == "incoming":
        ends = [src for src, _ in graph.in_edges(node_id)]
    else:
        ends = [tgt for _, tgt in graph.out_edges(node_id)]

    slots = [neighbor_slot[end] for end in ends if end in neighbor_slot]
    if not slots:
        return float("inf")
    return sum(slots) / len(slots)


def count_crossings(ordering: list[list[int]], graph: nx.MultiDiGraph) -> int:
    """Count wire crossings between consecutive columns.

    Wires sharing a source slot or a target slot do not cross. For each column
    pair the wires are sorted by (source slot, target slot); crossings are then
    the strict inversions among target slots, counted by merge sort in
    O(E log E).
    """
    total = 0
    for col_idx in range(len(ordering) - 1):
        tgt_slot = {nid: i for i, nid in enumerate(ordering[col_idx + 1])}
        wires: list[tuple[int, int]] = []
        for src_slot, src_id in enumerate(ordering[col_idx]):
            if src_id not in graph:
                continue
            for _, tgt_id in graph.out_edges(src_id):
                if tgt_id in tgt_slot:
                    wires.append((src_slot, tgt_slot[tgt_id]))
        wires.sort()
        _, inversions = _sort_and_count([tgt for _, tgt in wires])
        total += inversions
    return total


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    """Merge sort ``values``, also returning how many pairs i < j have values[i] > values[j]."""
    if len(values) <= 1:
        return values, 0

    mid = len(values) // 2
    left, inversions = _sort_and_count(values[:mid])
    right, right_inversions = _sort_and_count(values[mid:])
    inversions += right_inversions

    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            # right[j] is smaller than every value still waiting on the left
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions
