from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field


@dataclass
class Counters:
    hazard_hits: int = 0
    hazard_spawns: int = 0
    attack_hits: int = 0
    attack_passes: int = 0
    glyph_count: int = 0

    def copy(self) -> Counters:
        return dataclasses.replace(self)


@dataclass
class Statistics:
    """Per-round and lifetime counters.

    Round counters are zeroed by begin_round(); lifetime counters only by
    reset_session().
    """

    round: Counters = field(default_factory=Counters)
    lifetime: Counters = field(default_factory=Counters)

    def begin_round(self, glyphs: int) -> None:
        self.round = Counters(glyph_count=glyphs)
        self.lifetime.glyph_count += glyphs

    def reset_session(self) -> None:
        self.round = Counters()
        self.lifetime = Counters()

    def _bump(self, name: str, amount: int = 1) -> None:
        setattr(self.round, name, getattr(self.round, name) + amount)
        setattr(self.lifetime, name, getattr(self.lifetime, name) + amount)

    def record_hazard_hit(self) -> None:
        self._bump("hazard_hits")

    def record_hazard_spawns(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        self._bump("hazard_spawns", amount)

    def record_attack_hit(self) -> None:
        self._bump("attack_hits")

    def record_attack_pass(self) -> None:
        self._bump("attack_passes")
