"""Tests for BlastOptions and Clock."""
from __future__ import annotations

import pytest

from tick_blast.clock import Clock
from tick_blast.config import TICK_DURATION, BlastOptions
from tick_blast.types import ConfigError


class TestBlastOptions:
    def test_defaults(self) -> None:
        opts = BlastOptions()
        assert opts.active_glyphs == 4
        assert opts.fast_mode is False
        assert opts.hazard_trail is False
        assert opts.look_ahead_orbs is False

    def test_look_ahead_needs_both(self) -> None:
        assert BlastOptions(fast_mode=True, hazard_trail=True).look_ahead_orbs
        assert not BlastOptions(fast_mode=True).look_ahead_orbs
        assert not BlastOptions(hazard_trail=True).look_ahead_orbs

    @pytest.mark.parametrize("count", [3, 7, -1])
    def test_glyph_range(self, count: int) -> None:
        with pytest.raises(ConfigError):
            BlastOptions(active_glyphs=count)

    def test_glyph_type(self) -> None:
        with pytest.raises(ConfigError):
            BlastOptions(active_glyphs="5")  # type: ignore[arg-type]
        with pytest.raises(ConfigError):
            BlastOptions(active_glyphs=True)

    def test_flag_type(self) -> None:
        with pytest.raises(ConfigError):
            BlastOptions(fast_mode=1)  # type: ignore[arg-type]

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            BlastOptions(active_glyphs=9)

    def test_from_mapping_ui_keys(self) -> None:
        opts = BlastOptions.from_mapping(
            {"activeGlyphCount": 6, "fastMode": True, "hazardTrail": True}
        )
        assert opts == BlastOptions(active_glyphs=6, fast_mode=True, hazard_trail=True)

    def test_from_mapping_field_names(self) -> None:
        assert BlastOptions.from_mapping({"active_glyphs": 5}).active_glyphs == 5

    def test_from_mapping_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="Unknown option"):
            BlastOptions.from_mapping({"speed": 2})

    def test_frozen(self) -> None:
        opts = BlastOptions()
        with pytest.raises(AttributeError):
            opts.fast_mode = True  # type: ignore[misc]


class TestClock:
    def test_defaults(self) -> None:
        clock = Clock()
        assert clock.period == TICK_DURATION
        assert clock.tick == 0

    def test_advance_and_elapsed(self) -> None:
        clock = Clock(period=0.5)
        clock.advance()
        clock.advance()
        assert clock.tick == 2
        assert clock.elapsed == pytest.approx(1.0)

    def test_reset(self) -> None:
        clock = Clock()
        clock.advance()
        clock.reset()
        assert clock.tick == 0

    def test_invalid_period(self) -> None:
        with pytest.raises(ValueError):
            Clock(period=0)
