"""Host adapters: where the engine reads graphs from and writes positions to."""

from __future__ import annotations

from ghjson_layout.sinks.base import GraphSource, PositionSink
from ghjson_layout.sinks.document import DocumentPositionSink
from ghjson_layout.sinks.mapping import MappingPositionSink

__all__ = [
    "DocumentPositionSink",
    "GraphSource",
    "MappingPositionSink",
    "PositionSink",
]
