"""Memory Blast — pattern avoidance trainer.

Four glyphs light up in a random order, then each quadrant in turn is the
only one the blast spares. Click tiles to walk into the safe quadrant.

Controls:
  Left-click  Move player toward tile
  Space       Start (replays the current pattern if any)
  R           Restart same pattern
  N           New pattern
  4 / 5 / 6   Active glyph count for the next round
  F           Toggle Feeling Special (faster, extra orb)
  D           Toggle Double Trouble (magical orb trail)
  Escape      Quit
"""
from __future__ import annotations

import argparse
import dataclasses
import sys

import pygame
from loguru import logger

from tick_blast import TICK_DURATION, BlastEngine, BlastOptions, ConfigError

from game.cues import Cues
from ui.arena import build_background, draw_glyphs, draw_orbs, draw_player, draw_quadrants, tile_at
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.panel import draw_panel


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Memory Blast — tick-blast visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--glyphs", type=int, default=4, help="Active glyphs, 4-6 (default: 4)")
    p.add_argument("--fast", action="store_true", help="Start with Feeling Special on")
    p.add_argument("--trail", action="store_true", help="Start with Double Trouble on")
    p.add_argument("--tick-ms", type=int, default=int(TICK_DURATION * 1000),
                   help="Milliseconds per tick (default: 600)")
    return p.parse_args()


class GameState:
    """Engine plus the options the player is editing for the next round."""

    def __init__(self, args: argparse.Namespace) -> None:
        self.pending = BlastOptions(
            active_glyphs=args.glyphs, fast_mode=args.fast, hazard_trail=args.trail,
        )
        self.engine = BlastEngine(self.pending, seed=args.seed,
                                  period=args.tick_ms / 1000.0)
        self.cues = Cues(self.engine.bus)
        self.running = False

    def start(self) -> None:
        self.engine.start_round(self.pending)
        self.running = True

    def restart(self) -> None:
        self.engine.restart_round()
        self.running = True

    def new_pattern(self) -> None:
        self.engine.new_round(self.pending)
        self.running = True

    def edit(self, **changes: object) -> None:
        try:
            self.pending = dataclasses.replace(self.pending, **changes)
        except ConfigError as exc:
            logger.warning("Ignored option change: {}", exc)


def main() -> None:
    args = parse_args()
    try:
        state = GameState(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Memory Blast — tick-blast demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    background = build_background()

    tick_interval = state.engine.clock.period
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.start()
                    accumulator = 0.0
                elif event.key == pygame.K_r:
                    state.restart()
                    accumulator = 0.0
                elif event.key == pygame.K_n:
                    state.new_pattern()
                    accumulator = 0.0
                elif event.key in (pygame.K_4, pygame.K_5, pygame.K_6):
                    state.edit(active_glyphs=4 + event.key - pygame.K_4)
                elif event.key == pygame.K_f:
                    state.edit(fast_mode=not state.pending.fast_mode)
                elif event.key == pygame.K_d:
                    state.edit(hazard_trail=not state.pending.hazard_trail)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                tile = tile_at(event.pos)
                if tile is not None:
                    state.engine.set_target(tile)

        # --- Tick engine at fixed rate ---
        if state.running:
            while accumulator >= tick_interval:
                accumulator -= tick_interval
                if state.engine.tick() is None:
                    state.running = False
                    break
        else:
            accumulator = 0.0

        # --- Render ---
        snap = state.engine.snapshot()
        screen.fill(BG_COLOR)
        screen.blit(background, (0, 0))
        draw_quadrants(screen, snap)
        draw_glyphs(screen, snap)
        draw_orbs(screen, snap)
        draw_player(screen, snap)
        draw_panel(screen, font, snap, state.pending, state.cues.frame())

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
