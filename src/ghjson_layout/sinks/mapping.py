"""Position sink that only records positions, for host-free use."""

from __future__ import annotations

from ghjson_layout.graph import Position


class MappingPositionSink:
    """Collects written positions into ``positions`` in write order."""

    def __init__(self) -> None:
        self.positions: dict[int, Position] = {}

    def write(self, node_id: int, position: Position) -> None:
        self.positions[node_id] = position
