"""Arena, quadrant, glyph, orb and player rendering."""
from __future__ import annotations

import math

import pygame

from tick_blast import QUADRANTS, ArenaSnapshot, Element, Tile

from ui.constants import (
    ARENA_INNER,
    ARENA_MIDDLE,
    ARENA_OUTER,
    ARENA_PX,
    ARENA_STAR,
    GRID_LINE,
    PLAYER_STROKE,
    RING_INNER,
    RING_MIDDLE,
    RING_OUTER,
    TARGET_STROKE,
    TILE_SIZE,
    hex_to_rgba,
)

# Screen-space arc (radians, y down) swept by each quadrant.
_ARCS: dict[Element, tuple[float, float]] = {
    Element.FIRE: (math.pi, 1.5 * math.pi),
    Element.SHADOW: (1.5 * math.pi, 2 * math.pi),
    Element.ICE: (0.5 * math.pi, math.pi),
    Element.LIGHTNING: (0.0, 0.5 * math.pi),
}

_CENTER = (ARENA_PX // 2, ARENA_PX // 2)


def _wedge(element: Element, radius: float, steps: int = 24) -> list[tuple[float, float]]:
    start, end = _ARCS[element]
    cx, cy = _CENTER
    points = [(cx, cy)]
    for i in range(steps + 1):
        a = start + (end - start) * i / steps
        points.append((cx + radius * math.cos(a), cy + radius * math.sin(a)))
    return points


def _tile_rect(tile: Tile) -> pygame.Rect:
    return pygame.Rect(tile[0] * TILE_SIZE, tile[1] * TILE_SIZE, TILE_SIZE, TILE_SIZE)


def build_background() -> pygame.Surface:
    """Static arena image; drawn once and blitted every frame."""
    surface = pygame.Surface((ARENA_PX, ARENA_PX), pygame.SRCALPHA)
    for radius, color in ((RING_OUTER, ARENA_OUTER), (RING_MIDDLE, ARENA_MIDDLE),
                          (RING_INNER, ARENA_INNER)):
        pygame.draw.circle(surface, color, _CENTER, radius * TILE_SIZE)

    # Four-point star separating the quadrants.
    cx, cy = _CENTER
    reach = RING_OUTER * TILE_SIZE
    half = int(0.6 * TILE_SIZE)
    for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
        tip = (cx + dx * reach, cy + dy * reach)
        side_a = (cx + dy * half, cy + dx * half)
        side_b = (cx - dy * half, cy - dx * half)
        pygame.draw.polygon(surface, ARENA_STAR, [tip, side_a, side_b])

    grid = pygame.Surface((ARENA_PX, ARENA_PX), pygame.SRCALPHA)
    for i in range(RING_OUTER * 2 + 1):
        pygame.draw.line(grid, GRID_LINE, (i * TILE_SIZE, 0), (i * TILE_SIZE, ARENA_PX))
        pygame.draw.line(grid, GRID_LINE, (0, i * TILE_SIZE), (ARENA_PX, i * TILE_SIZE))
    surface.blit(grid, (0, 0))
    return surface


def draw_quadrants(surface: pygame.Surface, snap: ArenaSnapshot) -> None:
    """Overlay the blasted quadrants with their translucent colour."""
    if not snap.active:
        return
    overlay = pygame.Surface((ARENA_PX, ARENA_PX), pygame.SRCALPHA)
    for q in QUADRANTS:
        if q.element in snap.active:
            pygame.draw.polygon(overlay, hex_to_rgba(q.fill),
                                _wedge(q.element, RING_OUTER * TILE_SIZE))
    surface.blit(overlay, (0, 0))


def draw_glyphs(surface: pygame.Surface, snap: ArenaSnapshot) -> None:
    for q in QUADRANTS:
        lit = snap.lit_glyph is q.element
        color = hex_to_rgba(q.glyph_active_fill if lit else q.glyph_inactive_fill)
        pygame.draw.rect(surface, color, _tile_rect(q.glyph))


def draw_orbs(surface: pygame.Surface, snap: ArenaSnapshot) -> None:
    radius = int(0.45 * TILE_SIZE)
    for orb in snap.orbs:
        center = _tile_rect(orb.tile).center
        pygame.draw.circle(surface, hex_to_rgba(orb.fill), center, radius)


def draw_player(surface: pygame.Surface, snap: ArenaSnapshot) -> None:
    if snap.target != snap.player:
        pygame.draw.rect(surface, TARGET_STROKE, _tile_rect(snap.target), 2)
    pygame.draw.rect(surface, PLAYER_STROKE, _tile_rect(snap.player), 3)


def tile_at(pos: tuple[int, int]) -> Tile | None:
    """Arena tile under a screen position, or None outside the arena."""
    x, y = pos
    if not (0 <= x < ARENA_PX and 0 <= y < ARENA_PX):
        return None
    return x // TILE_SIZE, y // TILE_SIZE
