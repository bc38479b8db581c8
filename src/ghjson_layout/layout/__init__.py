"""Layout engine: topology analysis, grid placement and orchestration."""

from __future__ import annotations

from ghjson_layout.layout.crossing import MAX_PASSES, count_crossings, minimise_crossings
from ghjson_layout.layout.grid import GridLayoutPlanner, island_levels
from ghjson_layout.layout.orchestrator import (
    NULL_DOCUMENT_MESSAGE,
    LayoutOrchestrator,
    analyze_layout,
    organize,
    tidy_all,
)
from ghjson_layout.layout.topology import (
    DepthAssignment,
    TopologyAnalyzer,
    find_islands,
    find_sinks,
    find_sources,
    group_depth_levels,
)
from ghjson_layout.layout.types import LayoutAnalysis, LayoutResult, TidyResult

__all__ = [
    "MAX_PASSES",
    "NULL_DOCUMENT_MESSAGE",
    "DepthAssignment",
    "GridLayoutPlanner",
    "LayoutAnalysis",
    "LayoutOrchestrator",
    "LayoutResult",
    "TidyResult",
    "TopologyAnalyzer",
    "analyze_layout",
    "count_crossings",
    "find_islands",
    "find_sinks",
    "find_sources",
    "group_depth_levels",
    "island_levels",
    "minimise_crossings",
    "organize",
    "tidy_all",
]
