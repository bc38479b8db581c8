"""Layout types shared across the analyzer, planner and orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field

from ghjson_layout.graph import Position


@dataclass
class LayoutAnalysis:
    """Read-only topology report for a graph.

    Attributes:
        source_ids: Nodes without inbound edges, input order.
        sink_ids: Nodes without outbound edges, input order.
        depths: Node id → longest-path depth from any source.
        depth_levels: Depth → node ids at that depth (keys ascending, ids in
            input order).
        islands: Connected components of the undirected view, in discovery
            order.
        max_depth: Largest depth, 0 for an empty graph.
        average_edges_per_node: Retained edges divided by node count.
        is_acyclic: False when the graph contains a directed cycle.
        suppressed_ids: Nodes whose depth propagation hit the re-visit cap.
        dropped_edge_count: Edges ignored because an endpoint was unknown.
    """

    source_ids: list[int] = field(default_factory=list)
    sink_ids: list[int] = field(default_factory=list)
    depths: dict[int, int] = field(default_factory=dict)
    depth_levels: dict[int, list[int]] = field(default_factory=dict)
    islands: list[list[int]] = field(default_factory=list)
    max_depth: int = 0
    average_edges_per_node: float = 0.0
    is_acyclic: bool = True
    suppressed_ids: list[int] = field(default_factory=list)
    dropped_edge_count: int = 0


@dataclass
class LayoutResult:
    """Positions computed by one layout run plus the topology behind them."""

    positions: dict[int, Position] = field(default_factory=dict)
    source_ids: list[int] = field(default_factory=list)
    sink_ids: list[int] = field(default_factory=list)
    islands: list[list[int]] = field(default_factory=list)
    max_depth: int = 0
    modified: bool = False


@dataclass
class TidyResult:
    """Outcome of ``LayoutOrchestrator.organize``."""

    success: bool = False
    nodes_organized: int = 0
    modified: bool = False
    error_message: str | None = None
    layout: LayoutResult | None = None
