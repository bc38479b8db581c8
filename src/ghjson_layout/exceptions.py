"""Exceptions raised by ghjson_layout.

The layout engine itself never raises for malformed graphs; the only errors
surfaced to callers are configuration mistakes caught when options are built.
"""

from __future__ import annotations


class InvalidLayoutOptionsError(ValueError):
    """A layout option was given a value the planner cannot use.

    Raised when options are constructed, never during a layout run.

    Attributes:
        field: Name of the offending option
        value: The rejected value
        message: Human-readable error message
    """

    def __init__(self, field: str, value: object, message: str | None = None) -> None:
        self.field = field
        self.value = value
        self.message = message or f"Invalid value for layout option '{field}': {value!r}"
        super().__init__(self.message)
