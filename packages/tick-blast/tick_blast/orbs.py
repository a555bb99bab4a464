"""OrbField - magical orbs keyed by the tile they occupy."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tick_blast.arena import quadrant, quadrant_containing
from tick_blast.config import ORB_LIFETIME
from tick_blast.types import Element, Tile


@dataclass(frozen=True)
class MagicalOrb:
    tile: Tile
    spawn_tick: int
    element: Element

    @property
    def fill(self) -> str:
        return quadrant(self.element).orb_fill

    def age(self, tick: int) -> int:
        return tick - self.spawn_tick


class OrbField:
    """Live orbs, at most one per tile.

    Spawning on an occupied tile replaces the orb already there.
    """

    def __init__(self, lifetime: int = ORB_LIFETIME) -> None:
        if lifetime <= 0:
            raise ValueError("lifetime must be positive")
        self._lifetime = lifetime
        self._orbs: dict[Tile, MagicalOrb] = {}

    @property
    def lifetime(self) -> int:
        return self._lifetime

    def spawn(self, tile: Tile, tick: int) -> MagicalOrb:
        orb = MagicalOrb(tile, tick, quadrant_containing(tile).element)
        self._orbs[tile] = orb
        return orb

    def at(self, tile: Tile) -> MagicalOrb | None:
        return self._orbs.get(tile)

    def collide(self, tile: Tile) -> MagicalOrb | None:
        """Remove and return the orb on *tile*, if any."""
        return self._orbs.pop(tile, None)

    def expire(self, tick: int) -> list[MagicalOrb]:
        """Remove orbs that have lived for the full lifetime at *tick*."""
        expired = [o for o in self._orbs.values() if o.age(tick) >= self._lifetime]
        for orb in expired:
            del self._orbs[orb.tile]
        return expired

    def clear(self) -> None:
        self._orbs.clear()

    def tiles(self) -> frozenset[Tile]:
        return frozenset(self._orbs)

    def __contains__(self, tile: object) -> bool:
        return tile in self._orbs

    def __iter__(self) -> Iterator[MagicalOrb]:
        return iter(list(self._orbs.values()))

    def __len__(self) -> int:
        return len(self._orbs)
