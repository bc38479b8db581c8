"""In-memory graph document: components, connections and their pivots.

This is the host-side model the layout engine reads from and writes back to.
Parsing it from JSON and validating it belong to the serialization layer; here
it is only a container with a ``snapshot()`` for the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ghjson_layout.graph import DirectedEdge, Node, Position


@dataclass
class Component:
    """A component placed on the canvas."""

    id: int
    name: str = ""
    pivot: Position | None = None


@dataclass
class Connection:
    """A wire between an output parameter and an input parameter."""

    from_id: int
    to_id: int
    from_param: str = ""
    to_param: str = ""


@dataclass
class GraphDocument:
    """A visual-programming graph: ordered components plus connections."""

    components: list[Component] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)

    def snapshot(self) -> tuple[list[Node], list[DirectedEdge]]:
        """Copy the document into engine nodes and edges, preserving order."""
        nodes = [Node(id=c.id, existing_position=c.pivot) for c in self.components]
        edges = [DirectedEdge(from_id=conn.from_id, to_id=conn.to_id) for conn in self.connections]
        return nodes, edges

    def find_component(self, component_id: int) -> Component | None:
        for component in self.components:
            if component.id == component_id:
                return component
        return None
