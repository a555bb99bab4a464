"""tick-blast - Deterministic tick engine for the memory blast pattern-avoidance minigame."""
from __future__ import annotations

from tick_blast.arena import (
    QUADRANTS,
    Quadrant,
    are_adjacent,
    are_opposite,
    check_bounds,
    in_bounds,
    quadrant,
    quadrant_containing,
)
from tick_blast.clock import Clock
from tick_blast.config import TICK_DURATION, BlastOptions
from tick_blast.engine import BlastEngine, TickOutcome
from tick_blast.movement import step_toward
from tick_blast.orbs import MagicalOrb, OrbField
from tick_blast.pattern import generate_pattern
from tick_blast.runner import TickRunner
from tick_blast.sequence import compile_sequence, timeline_length
from tick_blast.signals import SignalBus
from tick_blast.state import ArenaSnapshot, RoundState
from tick_blast.stats import Counters, Statistics
from tick_blast.types import (
    ConfigError,
    Element,
    Event,
    EventKind,
    InvariantError,
    ReentrantTickError,
    Tile,
)

__all__ = [
    "BlastEngine",
    "BlastOptions",
    "TickRunner",
    "TickOutcome",
    "ArenaSnapshot",
    "RoundState",
    "Clock",
    "SignalBus",
    "Statistics",
    "Counters",
    "OrbField",
    "MagicalOrb",
    "Quadrant",
    "QUADRANTS",
    "quadrant",
    "quadrant_containing",
    "are_opposite",
    "are_adjacent",
    "in_bounds",
    "check_bounds",
    "generate_pattern",
    "compile_sequence",
    "timeline_length",
    "step_toward",
    "Element",
    "Event",
    "EventKind",
    "Tile",
    "TICK_DURATION",
    "ConfigError",
    "InvariantError",
    "ReentrantTickError",
]
