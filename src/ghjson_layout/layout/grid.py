"""Grid placement: depth columns, islands stacked top to bottom.

Each island is laid out on its own: depth ``d`` maps to column
``start_x + d * horizontal_spacing`` and nodes of one column stack downwards
by ``vertical_spacing``. The next island starts ``island_spacing`` below the
lowest node of the previous one, so islands never overlap and no global
overlap pass is needed.
"""

from __future__ import annotations

import logging

from ghjson_layout.config import GridOptions
from ghjson_layout.graph import GraphModel, Node, Position
from ghjson_layout.layout.crossing import minimise_crossings
from ghjson_layout.layout.types import LayoutAnalysis

logger = logging.getLogger(__name__)


class GridLayoutPlanner:
    """Turns a ``LayoutAnalysis`` into canvas positions."""

    def __init__(self, options: GridOptions | None = None) -> None:
        self.options = options or GridOptions()

    def plan(self, graph: GraphModel, analysis: LayoutAnalysis) -> dict[int, Position]:
        """Place every node of ``analysis``; empty analysis gives ``{}``."""
        opts = self.options
        positions: dict[int, Position] = {}
        rank: dict[int, int] = {nid: i for i, nid in enumerate(analysis.depths)}

        current_top = float(opts.start_y)
        for island_idx, island in enumerate(analysis.islands):
            levels = island_levels(island, analysis.depths, rank)
            if opts.minimize_crossings and len(levels) > 1:
                ordered = minimise_crossings([ids for _, ids in levels], graph.digraph)
                levels = [(depth, ids) for (depth, _), ids in zip(levels, ordered)]

            max_y = current_top
            for depth, ids in levels:
                x = float(opts.start_x + depth * opts.horizontal_spacing)
                y = current_top
                for node_id in ids:
                    positions[node_id] = Position(x, y)
                    max_y = max(max_y, y)
                    y += opts.vertical_spacing

            logger.debug(
                "Placed island %d (%d nodes, %d columns) at top=%s",
                island_idx,
                len(island),
                len(levels),
                current_top,
            )
            current_top = max_y + opts.island_spacing

        return positions

    def normalize(self, nodes: list[Node]) -> dict[int, Position]:
        """Keep existing positions but move their bounding box to the start point.

        Nodes without an existing position are left out.
        """
        placed = [n for n in nodes if n.existing_position is not None]
        if not placed:
            return {}

        min_x = min(n.existing_position.x for n in placed)
        min_y = min(n.existing_position.y for n in placed)
        dx = self.options.start_x - min_x
        dy = self.options.start_y - min_y

        positions: dict[int, Position] = {}
        for n in placed:
            positions.setdefault(n.id, Position(float(n.existing_position.x + dx), float(n.existing_position.y + dy)))
        return positions


def island_levels(
    island: list[int],
    depths: dict[int, int],
    rank: dict[int, int],
) -> list[tuple[int, list[int]]]:
    """Depth levels restricted to one island.

    Returns ``(depth, node_ids)`` pairs, depth ascending; ids within a level
    follow ``rank`` (input order).
    """
    ordered = sorted(island, key=lambda nid: (depths.get(nid, 0), rank.get(nid, 0)))

    levels: list[tuple[int, list[int]]] = []
    for node_id in ordered:
        depth = depths.get(node_id, 0)
        if levels and levels[-1][0] == depth:
            levels[-1][1].append(node_id)
        else:
            levels.append((depth, [node_id]))
    return levels
