"""Signal subscribers turning engine notifications into audio/visual cues."""
from __future__ import annotations

from pathlib import Path

import pygame

from tick_blast import SignalBus
from tick_blast import signals

# How many frames a hit/pass message stays on screen.
FLASH_FRAMES = 45

RES_DIR = Path(__file__).resolve().parent.parent / "res"


def _load_sound(name: str) -> pygame.mixer.Sound | None:
    path = RES_DIR / name
    if not path.exists() or not pygame.mixer.get_init():
        return None
    return pygame.mixer.Sound(str(path))


class Cues:
    """Plays the glyph/blast sounds and keeps the latest hit/pass message."""

    def __init__(self, bus: SignalBus) -> None:
        self._glyph_sfx = _load_sound("glyph-sfx.ogg")
        self._blast_sfx = _load_sound("blast-sfx.ogg")
        self._message: str | None = None
        self._good = False
        self._frames = 0

        bus.subscribe(signals.GLYPH_LIT, self._on_glyph)
        bus.subscribe(signals.BLAST_FORMED, self._on_blast)
        bus.subscribe(signals.BLAST_HIT, self._on_hit)
        bus.subscribe(signals.BLAST_PASSED, self._on_pass)
        bus.subscribe(signals.ORB_TANKED, self._on_orb)
        bus.subscribe(signals.ROUND_ENDED, self._on_end)

    def _set(self, message: str, good: bool) -> None:
        self._message = message
        self._good = good
        self._frames = FLASH_FRAMES

    def _on_glyph(self, name: str, data: dict) -> None:
        if self._glyph_sfx is not None:
            self._glyph_sfx.play()

    def _on_blast(self, name: str, data: dict) -> None:
        if self._blast_sfx is not None:
            self._blast_sfx.play()

    def _on_hit(self, name: str, data: dict) -> None:
        self._set("Hit by the blast!", False)

    def _on_pass(self, name: str, data: dict) -> None:
        self._set(f"Dodged - {data['element'].value} was safe", True)

    def _on_orb(self, name: str, data: dict) -> None:
        self._set("Tanked a magical orb!", False)

    def _on_end(self, name: str, data: dict) -> None:
        stats = data["stats"]
        self._set(f"Round over: {stats.attack_passes}/{stats.glyph_count} passed",
                  stats.attack_hits == 0)

    def frame(self) -> tuple[str, bool] | None:
        """Current message, counting down one frame."""
        if self._frames <= 0 or self._message is None:
            return None
        self._frames -= 1
        return self._message, self._good
