"""Round state owned by the engine, and the read-only snapshot it hands out."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_blast.arena import quadrant
from tick_blast.config import START_TILE
from tick_blast.orbs import OrbField
from tick_blast.stats import Counters
from tick_blast.types import Element, Event, Tile


@dataclass
class RoundState:
    """Mutable state of the round in progress.

    ``safe`` is None while every quadrant is inert; otherwise it names the
    one quadrant the current blast spares and the other three are active.
    """

    player: Tile = START_TILE
    target: Tile = START_TILE
    lit_glyph: Element | None = None
    safe: Element | None = None
    previous: Event | None = None
    orbs: OrbField = field(default_factory=OrbField)
    finished: bool = False

    def active_quadrants(self) -> tuple[Element, ...]:
        if self.safe is None:
            return ()
        return tuple(e for e in Element if e is not self.safe)

    def in_blast(self, tile: Tile) -> bool:
        return any(quadrant(e).contains(tile) for e in self.active_quadrants())


@dataclass(frozen=True)
class OrbView:
    tile: Tile
    fill: str
    spawn_tick: int


@dataclass(frozen=True)
class ArenaSnapshot:
    """Everything a renderer needs for one frame."""

    tick: int
    length: int
    event: Event | None
    lit_glyph: Element | None
    safe: Element | None
    active: tuple[Element, ...]
    player: Tile
    target: Tile
    orbs: tuple[OrbView, ...]
    round: Counters
    lifetime: Counters
    finished: bool
