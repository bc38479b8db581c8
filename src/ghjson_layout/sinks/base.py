"""Protocols the layout engine uses to talk to its host."""

from __future__ import annotations

from typing import Protocol

from ghjson_layout.graph import DirectedEdge, Node, Position


class GraphSource(Protocol):
    """Anything that can hand the engine an ordered node/edge snapshot."""

    def snapshot(self) -> tuple[list[Node], list[DirectedEdge]]:
        """Return the current nodes and edges, in document order."""
        ...


class PositionSink(Protocol):
    """Protocol that all position write-back targets must implement."""

    def write(self, node_id: int, position: Position) -> None:
        """Apply a node's final position on the host side."""
        ...
