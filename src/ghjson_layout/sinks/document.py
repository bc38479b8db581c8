"""Position sink that writes pivots back onto a ``GraphDocument``."""

from __future__ import annotations

from ghjson_layout.document import Component, GraphDocument
from ghjson_layout.graph import Position


class DocumentPositionSink:
    """Sets ``Component.pivot`` for every position written."""

    def __init__(self, document: GraphDocument) -> None:
        self.document = document
        # First occurrence wins, matching GraphModel's handling of duplicate ids.
        self._by_id: dict[int, Component] = {}
        for component in document.components:
            self._by_id.setdefault(component.id, component)

    def write(self, node_id: int, position: Position) -> None:
        component = self._by_id.get(node_id)
        if component is None:
            raise KeyError(f"No component with id {node_id} in document")
        component.pivot = position
