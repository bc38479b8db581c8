"""Layout configuration.

``GridOptions`` holds the spacing recognised by the grid planner and
``TidyOptions`` extends it with the switches used by the orchestrator. Both
are plain dataclasses with defaults. ``TidySettings`` is generated from
``TidyOptions`` so every field can be overridden from ``GHJSON_TIDY_*``
environment variables.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import get_type_hints

from pydantic import create_model
from pydantic_settings import BaseSettings

from ghjson_layout.exceptions import InvalidLayoutOptionsError

_SPACING_FIELDS = ("horizontal_spacing", "vertical_spacing", "island_spacing")
_COORD_FIELDS = ("start_x", "start_y")


def _validate_numbers(options: object) -> None:
    for name in _SPACING_FIELDS + _COORD_FIELDS:
        value = getattr(options, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise InvalidLayoutOptionsError(name, value, f"Layout option '{name}' must be a finite number, got {value!r}")
    for name in _SPACING_FIELDS:
        value = getattr(options, name)
        if value < 0:
            raise InvalidLayoutOptionsError(name, value, f"Layout option '{name}' must not be negative, got {value!r}")


@dataclass
class GridOptions:
    """Spacing used by ``GridLayoutPlanner``.

    Attributes:
        horizontal_spacing: Distance between depth columns.
        vertical_spacing: Distance between nodes stacked in one column.
        island_spacing: Gap inserted below one island before the next starts.
        start_x: X of the first column.
        start_y: Y of the first island's top row.
        minimize_crossings: Reorder each column with the barycenter heuristic
            instead of keeping input order. Costs up to ``MAX_PASSES`` sweeps
            per island, each O(E log E) to score and O(N log N) to sort, on top
            of the plain placement.
    """

    horizontal_spacing: float = 200.0
    vertical_spacing: float = 100.0
    island_spacing: float = 150.0
    start_x: float = 0.0
    start_y: float = 0.0
    minimize_crossings: bool = False

    def __post_init__(self) -> None:
        _validate_numbers(self)


@dataclass
class TidyOptions(GridOptions):
    """Options for a tidy (pivot organize) run: grid spacing plus run switches."""

    organize_pivots: bool = True
    preserve_existing: bool = False

    @classmethod
    def default(cls) -> TidyOptions:
        return cls()

    @classmethod
    def from_env(cls, settings: BaseSettings | None = None) -> TidyOptions:
        """Build options from ``GHJSON_TIDY_*`` environment variables."""
        settings = settings or TidySettings()
        return cls(**settings.model_dump())

    def grid_options(self) -> GridOptions:
        return GridOptions(**{f.name: getattr(self, f.name) for f in fields(GridOptions)})


class _SettingsBase(BaseSettings):
    model_config = {"env_prefix": "GHJSON_TIDY_"}


def _settings_model() -> type[BaseSettings]:
    hints = get_type_hints(TidyOptions)
    return create_model(
        "TidySettings",
        __base__=_SettingsBase,
        __module__=__name__,
        **{f.name: (hints[f.name], f.default) for f in fields(TidyOptions)},
    )


TidySettings = _settings_model()
