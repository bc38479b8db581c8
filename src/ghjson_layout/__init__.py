"""ghjson_layout: dependency-graph layout for visual-programming documents."""

from __future__ import annotations

from ghjson_layout.config import GridOptions, TidyOptions, TidySettings
from ghjson_layout.document import Component, Connection, GraphDocument
from ghjson_layout.exceptions import InvalidLayoutOptionsError
from ghjson_layout.graph import DirectedEdge, GraphModel, Node, Position
from ghjson_layout.layout import (
    GridLayoutPlanner,
    LayoutAnalysis,
    LayoutOrchestrator,
    LayoutResult,
    TidyResult,
    TopologyAnalyzer,
    analyze_layout,
    organize,
    tidy_all,
)

__all__ = [
    "Component",
    "Connection",
    "DirectedEdge",
    "GraphDocument",
    "GraphModel",
    "GridLayoutPlanner",
    "GridOptions",
    "InvalidLayoutOptionsError",
    "LayoutAnalysis",
    "LayoutOrchestrator",
    "LayoutResult",
    "Node",
    "Position",
    "TidyOptions",
    "TidyResult",
    "TidySettings",
    "TopologyAnalyzer",
    "analyze_layout",
    "organize",
    "tidy_all",
]
