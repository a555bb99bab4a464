"""Side panel - options, statistics, and help text."""
from __future__ import annotations

import pygame

from tick_blast import ArenaSnapshot, BlastOptions

from ui.constants import (
    ARENA_PX,
    HIT_COLOR,
    LABEL_COLOR,
    PANEL_BG,
    PANEL_W,
    PASS_COLOR,
    SCREEN_H,
    TEXT_COLOR,
    TEXT_DIM,
)

HELP_LINES = [
    "Click      move the player",
    "Space      start",
    "R          restart same pattern",
    "N          new pattern",
    "4 / 5 / 6  active glyphs",
    "F          Feeling Special (faster)",
    "D          Double Trouble (orbs)",
    "Esc        quit",
]

INSTRUCTIONS = [
    "The glyphs light up in a random order.",
    "Each blast then spares one quadrant,",
    "in the same order. Stand in it.",
]


def stats_lines(snap: ArenaSnapshot) -> list[str]:
    r, t = snap.round, snap.lifetime
    return [
        f"Glyphs passed: {r.attack_passes}/{r.glyph_count} current, "
        f"{t.attack_passes}/{t.glyph_count} total",
        f"Glyphs failed: {r.attack_hits}/{r.glyph_count} current, "
        f"{t.attack_hits}/{t.glyph_count} total",
        f"Orbs tanked: {r.hazard_hits}/{r.hazard_spawns} current, "
        f"{t.hazard_hits}/{t.hazard_spawns} total",
    ]


def draw_panel(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snap: ArenaSnapshot,
    pending: BlastOptions,
    flash: tuple[str, bool] | None,
) -> None:
    x = ARENA_PX
    pygame.draw.rect(surface, PANEL_BG, (x, 0, PANEL_W, SCREEN_H))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, SCREEN_H))

    pad = 12
    line_h = 20
    cx = x + pad
    cy = 10

    def text(line: str, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        nonlocal cy
        surface.blit(font.render(line, True, color), (cx, cy))
        cy += line_h

    text("MEMORY BLAST", LABEL_COLOR)
    cy += 4
    if snap.length:
        status = "finished" if snap.finished else f"tick {snap.tick}/{snap.length}"
    else:
        status = "press Space to start"
    text(status, TEXT_DIM)
    cy += 8

    text("Options (next round)", LABEL_COLOR)
    text(f"  Active glyphs: {pending.active_glyphs}")
    text(f"  Feeling Special: {'on' if pending.fast_mode else 'off'}")
    text(f"  Double Trouble: {'on' if pending.hazard_trail else 'off'}")
    cy += 8

    text("Statistics", LABEL_COLOR)
    for line in stats_lines(snap):
        text(line)
    cy += 8

    if flash is not None:
        message, good = flash
        text(message, PASS_COLOR if good else HIT_COLOR)
    cy += 8

    for line in INSTRUCTIONS:
        text(line, TEXT_DIM)
    cy += 8
    for line in HELP_LINES:
        text(line, TEXT_DIM)
