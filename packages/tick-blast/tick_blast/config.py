"""Round options and timing constants."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from tick_blast.types import ConfigError, Tile

# Seconds between ticks (one game tick).
TICK_DURATION = 0.6

ARENA_RADIUS = 10
ARENA_SIZE = 2 * ARENA_RADIUS
START_TILE: Tile = (ARENA_RADIUS, ARENA_RADIUS)

MIN_GLYPHS = 4
MAX_GLYPHS = 6

# Ticks a magical orb stays on the arena.
ORB_LIFETIME = 6

_MAPPING_KEYS = {
    "activeGlyphCount": "active_glyphs",
    "fastMode": "fast_mode",
    "hazardTrail": "hazard_trail",
}


@dataclass(frozen=True)
class BlastOptions:
    """Immutable per-round configuration.

    Attributes:
        active_glyphs: Number of glyphs in the pattern (4-6).
        fast_mode: Shorter cooldowns ("Feeling Special"). Together with
            hazard_trail it also spawns a look-ahead orb.
        hazard_trail: Moving leaves a magical orb behind ("Double Trouble").
    """

    active_glyphs: int = MIN_GLYPHS
    fast_mode: bool = False
    hazard_trail: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.active_glyphs, bool) or not isinstance(self.active_glyphs, int):
            raise ConfigError(
                f"active_glyphs must be an int, got {type(self.active_glyphs).__name__}"
            )
        check_glyph_count(self.active_glyphs)
        for name in ("fast_mode", "hazard_trail"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be a bool, got {type(value).__name__}")

    @property
    def look_ahead_orbs(self) -> bool:
        return self.fast_mode and self.hazard_trail

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> BlastOptions:
        """Build options from UI-style keys (activeGlyphCount, fastMode, hazardTrail).

        Snake-case field names are accepted as well. Unknown keys raise.
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            field_name = _MAPPING_KEYS.get(key, key)
            if field_name not in ("active_glyphs", "fast_mode", "hazard_trail"):
                raise ConfigError(f"Unknown option {key!r}")
            kwargs[field_name] = value
        return cls(**kwargs)


def check_glyph_count(count: int) -> None:
    if not MIN_GLYPHS <= count <= MAX_GLYPHS:
        raise ConfigError(
            f"active glyph count must be in [{MIN_GLYPHS}, {MAX_GLYPHS}], got {count}"
        )
