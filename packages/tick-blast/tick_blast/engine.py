"""BlastEngine - the tick-driven memory blast state machine."""
from __future__ import annotations

import os
import random
import threading
from dataclasses import dataclass
from typing import Any, Mapping

from loguru import logger

from tick_blast import signals
from tick_blast.arena import check_bounds, quadrant_containing
from tick_blast.clock import Clock
from tick_blast.config import TICK_DURATION, BlastOptions
from tick_blast.movement import lookahead_offset, step_delta
from tick_blast.pattern import generate_pattern, is_valid_pattern
from tick_blast.sequence import compile_sequence
from tick_blast.signals import SignalBus
from tick_blast.state import ArenaSnapshot, OrbView, RoundState
from tick_blast.stats import Statistics
from tick_blast.types import (
    ConfigError,
    Element,
    Event,
    EventKind,
    InvariantError,
    Pattern,
    ReentrantTickError,
    Tile,
    Timeline,
)


@dataclass(frozen=True)
class TickOutcome:
    """What happened during one call to BlastEngine.tick()."""

    tick: int
    event: Event
    moved: bool
    spawned: tuple[Tile, ...]
    orb_hit: bool
    attack_hit: bool
    attack_pass: bool


class BlastEngine:
    """Owns one session: the current pattern, timeline, round state and stats.

    Lifecycle calls (start_round, restart_round, new_round) reset the round;
    tick() consumes one timeline entry. The engine performs no pacing of its
    own - see TickRunner for a timer, or drive tick() from a game loop.
    """

    def __init__(
        self,
        options: BlastOptions | None = None,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
        bus: SignalBus | None = None,
        period: float = TICK_DURATION,
    ) -> None:
        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            rng = random.Random(seed)
        self._seed = seed
        self._rng = rng
        self._options = options if options is not None else BlastOptions()
        self._bus = bus if bus is not None else SignalBus()
        self._clock = Clock(period)
        self._stats = Statistics()
        self._pattern: Pattern = ()
        self._timeline: Timeline = ()
        self._state = RoundState(finished=True)
        self._tick_lock = threading.Lock()

    # --- Accessors ---

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def options(self) -> BlastOptions:
        return self._options

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def stats(self) -> Statistics:
        return self._stats

    @property
    def pattern(self) -> Pattern:
        return self._pattern

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def finished(self) -> bool:
        return self._state.finished

    # --- Lifecycle ---

    def start_round(self, options: BlastOptions | Mapping[str, Any] | None = None) -> None:
        """Start a round, replaying the current pattern when it still fits.

        A new pattern is generated when none exists yet or when the
        requested glyph count differs from the current pattern's length.
        """
        self.begin_round(*self.plan_start_round(options))

    def restart_round(self) -> None:
        """Replay the current pattern with the current options."""
        if not self._pattern:
            self.start_round()
            return
        self.begin_round(self._options, self._pattern)

    def new_round(
        self,
        options: BlastOptions | Mapping[str, Any] | None = None,
        pattern: Pattern | None = None,
    ) -> None:
        """Start a round with a fresh pattern, or with *pattern* if given."""
        self.begin_round(*self.plan_new_round(options, pattern))

    def reset_session(self) -> None:
        """Forget the pattern and clear lifetime statistics."""
        self._pattern = ()
        self._timeline = ()
        self._state = RoundState(finished=True)
        self._clock.reset()
        self._stats.reset_session()
        self._bus.clear()

    def _resolve_options(self, options: BlastOptions | Mapping[str, Any] | None) -> BlastOptions:
        if options is None:
            return self._options
        if isinstance(options, BlastOptions):
            return options
        if isinstance(options, Mapping):
            try:
                return BlastOptions.from_mapping(options)
            except ConfigError as exc:
                logger.warning("Rejected round options {}: {}", dict(options), exc)
                raise
        raise ConfigError(f"options must be BlastOptions or a mapping, got {type(options).__name__}")

    def plan_start_round(
        self, options: BlastOptions | Mapping[str, Any] | None = None,
    ) -> tuple[BlastOptions, Pattern]:
        """Validate *options* and pick the pattern start_round() would play.

        Touches no round state, so a ConfigError here leaves the live round
        running.
        """
        opts = self._resolve_options(options)
        pattern = self._pattern
        if not pattern or len(pattern) != opts.active_glyphs:
            pattern = generate_pattern(opts.active_glyphs, self._rng)
        return opts, pattern

    def plan_new_round(
        self,
        options: BlastOptions | Mapping[str, Any] | None = None,
        pattern: Pattern | None = None,
    ) -> tuple[BlastOptions, Pattern]:
        """Validate *options* and *pattern* the way new_round() does, without starting."""
        opts = self._resolve_options(options)
        if pattern is None:
            return opts, generate_pattern(opts.active_glyphs, self._rng)
        pattern = tuple(pattern)
        if not is_valid_pattern(pattern):
            logger.warning("Rejected pattern {}", [e.value for e in pattern])
            raise ConfigError("pattern must be non-empty with adjacent consecutive glyphs")
        return opts, pattern

    def begin_round(self, options: BlastOptions, pattern: Pattern) -> None:
        """Reset round state and start playing *pattern* under *options*."""
        timeline = compile_sequence(pattern, fast_mode=options.fast_mode)
        with self._tick_lock:
            self._options = options
            self._pattern = pattern
            self._timeline = timeline
            self._state = RoundState()
            self._clock.reset()
            self._stats.begin_round(len(pattern))
            self._bus.clear()
        logger.info(
            "Round started: pattern={} fast_mode={} hazard_trail={} ticks={}",
            [e.value for e in pattern], options.fast_mode, options.hazard_trail, len(timeline),
        )
        self._bus.publish(signals.ROUND_STARTED, pattern=pattern, length=len(timeline))
        self._bus.flush()

    # --- Input ---

    def set_target(self, tile: Tile) -> None:
        """Record the tile the player should walk toward from the next tick on."""
        if len(tile) != 2 or any(isinstance(c, bool) or not isinstance(c, int) for c in tile):
            raise ValueError(f"target must be a pair of ints, got {tile!r}")
        tile = (tile[0], tile[1])
        check_bounds(tile)
        self._state.target = tile

    # --- Ticking ---

    def tick(self) -> TickOutcome | None:
        """Advance one step. Returns None once the timeline is exhausted."""
        if not self._tick_lock.acquire(blocking=False):
            raise ReentrantTickError("tick() entered while a tick is in progress")
        try:
            outcome = self._tick()
        finally:
            self._tick_lock.release()
        self._bus.flush()
        return outcome

    def run(self, n: int | None = None) -> list[TickOutcome]:
        """Tick up to *n* times (or to the end of the round) without pacing."""
        outcomes: list[TickOutcome] = []
        while n is None or len(outcomes) < n:
            outcome = self.tick()
            if outcome is None:
                break
            outcomes.append(outcome)
        return outcomes

    def _tick(self) -> TickOutcome | None:
        state = self._state
        if state.finished:
            return None
        index = self._clock.tick
        if index >= len(self._timeline):
            self._finish()
            return None

        event = self._timeline[index]
        opts = self._options

        # Movement, and the orbs it leaves behind.
        origin = state.player
        dx, dy = step_delta(origin, state.target)
        moved = (dx, dy) != (0, 0)
        state.player = (origin[0] + dx, origin[1] + dy)
        spawned: list[Tile] = []
        if moved and opts.hazard_trail:
            spawned.append(origin)
            if opts.look_ahead_orbs:
                ox, oy = lookahead_offset(dx, dy)
                spawned.append((state.player[0] + ox, state.player[1] + oy))
            for tile in spawned:
                orb = state.orbs.spawn(tile, index)
                self._bus.publish(signals.ORB_SPAWNED, tile=tile, element=orb.element)
            self._stats.record_hazard_spawns(len(spawned))

        self._apply(event)

        orb_hit = False
        if opts.hazard_trail:
            if state.orbs.collide(state.player) is not None:
                orb_hit = True
                self._stats.record_hazard_hit()
                self._bus.publish(signals.ORB_TANKED, tile=state.player)
            for orb in state.orbs.expire(index):
                self._bus.publish(signals.ORB_EXPIRED, tile=orb.tile)

        attack_hit = state.in_blast(state.player)
        attack_pass = False
        if attack_hit:
            self._stats.record_attack_hit()
            self._bus.publish(signals.BLAST_HIT, tile=state.player, element=event.element)
        elif event != state.previous and event.kind is EventKind.STAGE1:
            attack_pass = True
            self._stats.record_attack_pass()
            self._bus.publish(signals.BLAST_PASSED, element=event.element)

        state.previous = event
        self._clock.advance()
        return TickOutcome(
            tick=index,
            event=event,
            moved=moved,
            spawned=tuple(spawned),
            orb_hit=orb_hit,
            attack_hit=attack_hit,
            attack_pass=attack_pass,
        )

    def _apply(self, event: Event) -> None:
        state = self._state
        kind = event.kind
        if kind is EventKind.GLYPH:
            state.lit_glyph = event.element
            self._bus.publish(signals.GLYPH_LIT, element=event.element)
            self._check_invariants()
            return
        state.lit_glyph = None
        if kind is EventKind.STAGE1:
            state.safe = event.element
            self._bus.publish(signals.BLAST_FORMED, safe=event.element)
        elif kind in (EventKind.EMPTY, EventKind.RESET, EventKind.STAGE2):
            state.safe = None
        elif kind is EventKind.END:
            state.safe = None
            state.orbs.clear()
        else:
            raise InvariantError(f"unhandled event {event}")
        self._check_invariants()

    def _check_invariants(self) -> None:
        state = self._state
        if len(state.active_quadrants()) not in (0, 3):
            raise InvariantError(f"{len(state.active_quadrants())} quadrants active")
        if state.safe is not None and state.lit_glyph is not None:
            raise InvariantError("glyph lit while a blast is live")

    def _finish(self) -> None:
        self._state.finished = True
        self._state.lit_glyph = None
        self._state.safe = None
        r = self._stats.round
        logger.info(
            "Round ended: passed {}/{} failed {} orbs tanked {}/{}",
            r.attack_passes, r.glyph_count, r.attack_hits, r.hazard_hits, r.hazard_spawns,
        )
        self._bus.publish(signals.ROUND_ENDED, stats=r.copy())

    # --- Read-only view ---

    def snapshot(self) -> ArenaSnapshot:
        state = self._state
        return ArenaSnapshot(
            tick=self._clock.tick,
            length=len(self._timeline),
            event=state.previous,
            lit_glyph=state.lit_glyph,
            safe=state.safe,
            active=state.active_quadrants(),
            player=state.player,
            target=state.target,
            orbs=tuple(OrbView(o.tile, o.fill, o.spawn_tick) for o in state.orbs),
            round=self._stats.round.copy(),
            lifetime=self._stats.lifetime.copy(),
            finished=state.finished,
        )

    def quadrant_of_player(self) -> Element:
        return quadrant_containing(self._state.player).element
