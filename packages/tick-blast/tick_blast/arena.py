"""Arena geometry - quadrants, tile lookup, and quadrant relations."""
from __future__ import annotations

from dataclasses import dataclass

from tick_blast.config import ARENA_RADIUS, ARENA_SIZE
from tick_blast.types import Element, Tile


@dataclass(frozen=True)
class Quadrant:
    """One 10x10 corner of the arena.

    The fill colours are carried for renderers only; the engine never reads
    them except to colour orbs.
    """

    element: Element
    origin: Tile
    glyph: Tile
    fill: str
    orb_fill: str
    glyph_active_fill: str
    glyph_inactive_fill: str

    @property
    def bounds(self) -> tuple[Tile, Tile]:
        """Inclusive (top-left, bottom-right) tiles."""
        x, y = self.origin
        return (x, y), (x + ARENA_RADIUS - 1, y + ARENA_RADIUS - 1)

    def contains(self, tile: Tile) -> bool:
        (x1, y1), (x2, y2) = self.bounds
        return x1 <= tile[0] <= x2 and y1 <= tile[1] <= y2


FIRE_QUADRANT = Quadrant(
    Element.FIRE, origin=(0, 0), glyph=(8, 8),
    fill="#ea4631aa", orb_fill="#b47d29",
    glyph_active_fill="#ea4631", glyph_inactive_fill="#826042",
)
SHADOW_QUADRANT = Quadrant(
    Element.SHADOW, origin=(10, 0), glyph=(11, 8),
    fill="#696264aa", orb_fill="#1e191b",
    glyph_active_fill="#696264", glyph_inactive_fill="#4a4545",
)
ICE_QUADRANT = Quadrant(
    Element.ICE, origin=(0, 10), glyph=(8, 11),
    fill="#ede9ebaa", orb_fill="#cbdfde",
    glyph_active_fill="#ede9eb", glyph_inactive_fill="#aba19f",
)
LIGHTNING_QUADRANT = Quadrant(
    Element.LIGHTNING, origin=(10, 10), glyph=(11, 11),
    fill="#fdff8daa", orb_fill="#e9d672",
    glyph_active_fill="#fdff8d", glyph_inactive_fill="#a1955e",
)

QUADRANTS: tuple[Quadrant, ...] = (
    FIRE_QUADRANT, SHADOW_QUADRANT, ICE_QUADRANT, LIGHTNING_QUADRANT,
)

_BY_ELEMENT: dict[Element, Quadrant] = {q.element: q for q in QUADRANTS}

_OPPOSITE: dict[Element, Element] = {
    Element.FIRE: Element.LIGHTNING,
    Element.LIGHTNING: Element.FIRE,
    Element.SHADOW: Element.ICE,
    Element.ICE: Element.SHADOW,
}


def quadrant(element: Element) -> Quadrant:
    return _BY_ELEMENT[element]


def quadrant_containing(tile: Tile) -> Quadrant:
    """Return the quadrant holding *tile*.

    Total: anything not inside Fire, Shadow or Ice (including tiles off the
    grid) belongs to Lightning.
    """
    for q in (FIRE_QUADRANT, SHADOW_QUADRANT, ICE_QUADRANT):
        if q.contains(tile):
            return q
    return LIGHTNING_QUADRANT


def opposite(element: Element) -> Element:
    return _OPPOSITE[element]


def are_opposite(a: Element, b: Element) -> bool:
    return _OPPOSITE[a] is b


def are_adjacent(a: Element, b: Element) -> bool:
    """True if the quadrants share an edge."""
    return a is not b and not are_opposite(a, b)


def adjacent(element: Element) -> list[Element]:
    """Quadrants sharing an edge with *element*, in Element order."""
    return [e for e in Element if are_adjacent(element, e)]


def in_bounds(tile: Tile) -> bool:
    x, y = tile
    return 0 <= x < ARENA_SIZE and 0 <= y < ARENA_SIZE


def check_bounds(tile: Tile) -> None:
    if not in_bounds(tile):
        raise ValueError(
            f"{tuple(tile)} out of bounds for {ARENA_SIZE}x{ARENA_SIZE} arena"
        )
