"""Topology analysis: sources, sinks, depths and islands.

Phases:
  1. Source / sink detection
  2. Depth assignment (longest path from any source, bounded on cycles)
  3. Depth-level grouping
  4. Island discovery (connected components, edges taken as undirected)
"""

from __future__ import annotations

import logging
from collections import deque

import networkx as nx

from ghjson_layout.graph import GraphModel
from ghjson_layout.layout.types import LayoutAnalysis

logger = logging.getLogger(__name__)

# ─── Sources and Sinks ────────────────────────────────────────────────────────


def find_sources(graph: GraphModel) -> list[int]:
    """Nodes with no inbound edges, in input order."""
    return [nid for nid in graph.node_ids if not graph.inbound_neighbor_ids(nid)]


def find_sinks(graph: GraphModel) -> list[int]:
    """Nodes with no outbound edges, in input order."""
    return [nid for nid in graph.node_ids if not graph.outbound_neighbor_ids(nid)]


# ─── Depth Assignment ─────────────────────────────────────────────────────────


class DepthAssignment:
    """Result of depth assignment: each node gets its longest-path depth.

    Depth 0 is the source column. Nodes reachable from several sources take
    the largest depth seen. Nodes no source reaches (a cycle with no entry
    point) fall back to 0.

    Attributes:
        depths: Maps node id → depth, in input order.
        suppressed_ids: Nodes that hit the update cap, in the order they hit it.
        update_limit: The per-node cap that was applied.
    """

    def __init__(
        self,
        depths: dict[int, int],
        suppressed_ids: list[int],
        update_limit: int,
    ) -> None:
        self.depths = depths
        self.suppressed_ids = suppressed_ids
        self.update_limit = update_limit

    @classmethod
    def assign(cls, graph: GraphModel, sources: list[int] | None = None) -> DepthAssignment:
        """Assign depths by breadth-first longest-path propagation.

        The queue is seeded with every source at depth 0. Visiting
        ``(node, depth)`` raises the node's recorded depth when ``depth`` is
        larger and re-enqueues its successors at ``depth + 1``.

        The graph may contain cycles, so each node accepts at most N depth
        updates (N = node count). A longest path in an acyclic graph has at
        most N distinct depths, so the cap only ever triggers on a cycle; once
        reached the node keeps its last depth and stops propagating. Worst case
        O(N * (N + E)).
        """
        node_ids = graph.node_ids
        if sources is None:
            sources = find_sources(graph)

        limit = len(node_ids)
        depths: dict[int, int] = {}
        updates: dict[int, int] = dict.fromkeys(node_ids, 0)
        suppressed: dict[int, None] = {}

        queue: deque[tuple[int, int]] = deque((nid, 0) for nid in sources)
        while queue:
            node_id, depth = queue.popleft()

            recorded = depths.get(node_id)
            if recorded is not None and recorded >= depth:
                continue
            if updates[node_id] >= limit:
                suppressed.setdefault(node_id)
                continue

            depths[node_id] = depth
            updates[node_id] += 1
            for succ in graph.outbound_neighbor_ids(node_id):
                queue.append((succ, depth + 1))

        if suppressed:
            logger.warning(
                "Depth propagation capped at %d updates for %d node(s); graph has a cycle reachable from a source",
                limit,
                len(suppressed),
            )

        return cls(
            depths={nid: depths.get(nid, 0) for nid in node_ids},
            suppressed_ids=list(suppressed),
            update_limit=limit,
        )


def group_depth_levels(depths: dict[int, int]) -> dict[int, list[int]]:
    """Group node ids by depth; keys ascending, ids keep ``depths`` order."""
    levels: dict[int, list[int]] = {}
    for node_id, depth in depths.items():
        levels.setdefault(depth, []).append(node_id)
    return dict(sorted(levels.items()))


# ─── Island Discovery ─────────────────────────────────────────────────────────


def find_islands(graph: GraphModel) -> list[list[int]]:
    """Split the graph into connected components, ignoring edge direction.

    One BFS per node not yet visited, walking inbound then outbound
    neighbours. Islands come out in the order their first node appears in the
    input; members are listed in BFS order. O(N + E).
    """
    visited: set[int] = set()
    islands: list[list[int]] = []

    for start in graph.node_ids:
        if start in visited:
            continue

        island: list[int] = []
        queue: deque[int] = deque([start])
        visited.add(start)
        while queue:
            node_id = queue.popleft()
            island.append(node_id)
            for neighbor in graph.inbound_neighbor_ids(node_id) + graph.outbound_neighbor_ids(node_id):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        islands.append(island)

    return islands


# ─── Analyzer ─────────────────────────────────────────────────────────────────


class TopologyAnalyzer:
    """Computes a ``LayoutAnalysis`` without touching its input.

    Holds no state between calls, so one instance may be shared across
    threads working on independent graphs.
    """

    def analyze(self, graph: GraphModel) -> LayoutAnalysis:
        node_count = len(graph)
        if node_count == 0:
            return LayoutAnalysis(dropped_edge_count=graph.dropped_edge_count)

        sources = find_sources(graph)
        sinks = find_sinks(graph)
        assignment = DepthAssignment.assign(graph, sources)
        islands = find_islands(graph)

        logger.debug(
            "Analyzed %d nodes: %d source(s), %d sink(s), %d island(s)",
            node_count,
            len(sources),
            len(sinks),
            len(islands),
        )

        return LayoutAnalysis(
            source_ids=sources,
            sink_ids=sinks,
            depths=assignment.depths,
            depth_levels=group_depth_levels(assignment.depths),
            islands=islands,
            max_depth=max(assignment.depths.values(), default=0),
            average_edges_per_node=graph.edge_count / node_count,
            is_acyclic=nx.is_directed_acyclic_graph(graph.digraph),
            suppressed_ids=assignment.suppressed_ids,
            dropped_edge_count=graph.dropped_edge_count,
        )
