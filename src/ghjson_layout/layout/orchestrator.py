"""Tidy orchestration: analyze, plan, then write positions back.

``organize`` is the single entry point with a success/failure outcome. The
compute phase works on a snapshot of the document; the only mutation is the
final write-back through a ``PositionSink``. Callers must not run two
organize calls against the same document concurrently.
"""

from __future__ import annotations

import logging

from ghjson_layout.config import TidyOptions
from ghjson_layout.document import GraphDocument
from ghjson_layout.graph import GraphModel, Position
from ghjson_layout.layout.grid import GridLayoutPlanner
from ghjson_layout.layout.topology import TopologyAnalyzer
from ghjson_layout.layout.types import LayoutAnalysis, LayoutResult, TidyResult
from ghjson_layout.sinks.base import GraphSource, PositionSink
from ghjson_layout.sinks.document import DocumentPositionSink

logger = logging.getLogger(__name__)

NULL_DOCUMENT_MESSAGE = "Document is null"


class LayoutOrchestrator:
    """Runs GraphModel → TopologyAnalyzer → GridLayoutPlanner and applies the result."""

    def __init__(self, options: TidyOptions | None = None) -> None:
        self.options = options or TidyOptions.default()

    def organize(self, document: GraphSource | None, sink: PositionSink | None = None) -> TidyResult:
        """Reorganize the pivots of every node in ``document``.

        Args:
            document: Graph to lay out. ``None`` yields a failure result.
            sink: Where positions are written. Defaults to a
                ``DocumentPositionSink`` over ``document``, which needs a
                ``GraphDocument``; any other source must pass its own sink.

        Raises:
            TypeError: No ``sink`` was given and ``document`` is not a
                ``GraphDocument``. Raised before anything is computed.

        Returns:
            A ``TidyResult``. ``nodes_organized`` counts positions written and
            ``modified`` is set only when some node actually moved, so running
            twice in a row reports ``modified=False`` the second time.
        """
        if document is None:
            logger.warning("Cannot organize pivots: %s", NULL_DOCUMENT_MESSAGE)
            return TidyResult(success=False, error_message=NULL_DOCUMENT_MESSAGE)

        if not self.options.organize_pivots:
            logger.info("Pivot organization disabled; leaving document untouched")
            return TidyResult(success=True, nodes_organized=0, modified=False)

        if sink is None:
            if not isinstance(document, GraphDocument):
                raise TypeError(
                    f"No position sink given and {type(document).__name__} is not a GraphDocument; "
                    "pass sink= to write positions back"
                )
            sink = DocumentPositionSink(document)

        nodes, edges = document.snapshot()
        graph = GraphModel.build(nodes, edges)
        analysis = TopologyAnalyzer().analyze(graph)
        planner = GridLayoutPlanner(self.options.grid_options())

        if self.options.preserve_existing and nodes and all(n.existing_position is not None for n in nodes):
            logger.debug("All %d nodes already placed; normalizing existing positions", len(nodes))
            positions = planner.normalize(nodes)
        else:
            positions = planner.plan(graph, analysis)

        existing: dict[int, Position | None] = {}
        for node in nodes:
            existing.setdefault(node.id, node.existing_position)

        written = 0
        moved = 0
        for node_id in graph.node_ids:
            position = positions[node_id]
            sink.write(node_id, position)
            written += 1
            if existing.get(node_id) != position:
                moved += 1

        logger.debug(
            "Organized %d node(s) in %d island(s), %d moved, max depth %d",
            written,
            len(analysis.islands),
            moved,
            analysis.max_depth,
        )

        layout = LayoutResult(
            positions=positions,
            source_ids=analysis.source_ids,
            sink_ids=analysis.sink_ids,
            islands=analysis.islands,
            max_depth=analysis.max_depth,
            modified=moved > 0,
        )
        return TidyResult(success=True, nodes_organized=written, modified=moved > 0, layout=layout)


def organize(
    document: GraphSource | None,
    options: TidyOptions | None = None,
    sink: PositionSink | None = None,
) -> TidyResult:
    """Organize ``document`` with ``options`` (defaults when omitted)."""
    return LayoutOrchestrator(options).organize(document, sink)


def tidy_all(document: GraphDocument | None) -> TidyResult:
    """Run every tidy operation with default options."""
    return LayoutOrchestrator(TidyOptions.default()).organize(document)


def analyze_layout(document: GraphSource | None) -> LayoutAnalysis:
    """Read-only topology report; an empty report for ``None``."""
    if document is None:
        return LayoutAnalysis()
    nodes, edges = document.snapshot()
    return TopologyAnalyzer().analyze(GraphModel.build(nodes, edges))
