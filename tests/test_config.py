"""Tests for config.py - option defaults, validation and environment overrides."""

from __future__ import annotations

import math
from dataclasses import fields

import pytest
from pydantic import ValidationError

from ghjson_layout.config import GridOptions, TidyOptions, TidySettings
from ghjson_layout.exceptions import InvalidLayoutOptionsError


class TestDefaults:
    def test_tidy_defaults(self):
        """Defaults match the documented spacing."""
        opts = TidyOptions.default()
        assert opts.organize_pivots is True
        assert opts.preserve_existing is False
        assert opts.horizontal_spacing == 200
        assert opts.vertical_spacing == 100
        assert opts.island_spacing == 150
        assert (opts.start_x, opts.start_y) == (0, 0)
        assert opts.minimize_crossings is False

    def test_grid_options_conversion(self):
        """grid_options() copies every spacing field."""
        opts = TidyOptions(horizontal_spacing=1, vertical_spacing=2, island_spacing=3, start_x=4, start_y=5)
        grid = opts.grid_options()
        assert grid == GridOptions(
            horizontal_spacing=1,
            vertical_spacing=2,
            island_spacing=3,
            start_x=4,
            start_y=5,
        )


class TestValidation:
    def test_negative_spacing_rejected(self):
        """A negative spacing raises with the field name attached."""
        with pytest.raises(InvalidLayoutOptionsError) as excinfo:
            GridOptions(island_spacing=-1)
        assert excinfo.value.field == "island_spacing"
        assert excinfo.value.value == -1

    def test_is_value_error(self):
        """Callers can catch it as a plain ValueError."""
        with pytest.raises(ValueError):
            TidyOptions(vertical_spacing=-0.5)

    def test_non_finite_rejected(self):
        """NaN and infinity are not usable coordinates."""
        with pytest.raises(InvalidLayoutOptionsError):
            GridOptions(start_x=math.nan)
        with pytest.raises(InvalidLayoutOptionsError):
            TidyOptions(horizontal_spacing=math.inf)

    def test_negative_start_allowed(self):
        """Start coordinates may be negative."""
        assert GridOptions(start_x=-50, start_y=-10).start_x == -50

    def test_zero_spacing_allowed(self):
        """Zero spacing is accepted."""
        assert GridOptions(vertical_spacing=0).vertical_spacing == 0


class TestEnvironment:
    def test_from_env(self, monkeypatch):
        """GHJSON_TIDY_* variables override defaults."""
        monkeypatch.setenv("GHJSON_TIDY_HORIZONTAL_SPACING", "300")
        monkeypatch.setenv("GHJSON_TIDY_ORGANIZE_PIVOTS", "false")
        opts = TidyOptions.from_env()
        assert opts.horizontal_spacing == 300
        assert opts.organize_pivots is False
        assert opts.vertical_spacing == 100

    def test_from_explicit_settings(self):
        """A settings object can be passed directly."""
        opts = TidyOptions.from_env(TidySettings(vertical_spacing=42, minimize_crossings=True))
        assert opts.vertical_spacing == 42
        assert opts.minimize_crossings is True

    def test_malformed_env_value(self, monkeypatch):
        """Non-numeric values fail pydantic validation."""
        monkeypatch.setenv("GHJSON_TIDY_START_X", "left")
        with pytest.raises(ValidationError):
            TidySettings()

    def test_negative_env_value(self, monkeypatch):
        """Values pydantic accepts are still checked by the options."""
        monkeypatch.setenv("GHJSON_TIDY_ISLAND_SPACING", "-5")
        with pytest.raises(InvalidLayoutOptionsError):
            TidyOptions.from_env()


class TestSingleDeclaration:
    def test_tidy_options_extend_grid_options(self):
        """Every grid field is a tidy field with the same default."""
        tidy = {f.name: f.default for f in fields(TidyOptions)}
        for f in fields(GridOptions):
            assert tidy[f.name] == f.default

    def test_settings_cover_every_option(self):
        """The env settings expose exactly the TidyOptions fields and defaults."""
        expected = {f.name: f.default for f in fields(TidyOptions)}
        assert set(TidySettings.model_fields) == set(expected)
        assert TidySettings().model_dump() == expected

    def test_grid_options_carry_crossing_switch(self):
        """grid_options() forwards minimize_crossings without a hand-written copy."""
        assert TidyOptions(minimize_crossings=True).grid_options().minimize_crossings is True

    def test_env_reaches_grid_only_field(self, monkeypatch):
        """A field declared only on GridOptions is still read from the environment."""
        monkeypatch.setenv("GHJSON_TIDY_MINIMIZE_CROSSINGS", "true")
        assert TidyOptions.from_env().grid_options().minimize_crossings is True
