"""Sequence compiler - expands a pattern into a per-tick timeline."""
from __future__ import annotations

from tick_blast.pattern import is_valid_pattern
from tick_blast.types import Event, EventKind, InvariantError, Pattern, Timeline

EMPTY = Event(EventKind.EMPTY)
RESET = Event(EventKind.RESET)
END = Event(EventKind.END)

# Neutral ticks before the first glyph lights up.
LEAD_IN = 2


def compile_sequence(pattern: Pattern, fast_mode: bool = False) -> Timeline:
    """Return the timeline for *pattern*.

    Layout: lead-in, glyph/reset pairs, cooldown, one blast per glyph
    (stage 1 then its stage-2 tail), end. Fast mode drops the reset after
    the last glyph, halves the cooldown to one tick, and shortens each
    stage-2 tail from two ticks to one.
    """
    if not is_valid_pattern(pattern):
        raise InvariantError(f"invalid pattern {[e.value for e in pattern]}")

    events: list[Event] = [EMPTY] * LEAD_IN

    last = len(pattern) - 1
    for i, element in enumerate(pattern):
        events.append(Event(EventKind.GLYPH, element))
        if not (fast_mode and i == last):
            events.append(RESET)

    events.extend([EMPTY] * (1 if fast_mode else 2))

    tail = 1 if fast_mode else 2
    for element in pattern:
        events.append(Event(EventKind.STAGE1, element))
        events.extend([Event(EventKind.STAGE2, element)] * tail)

    events.append(END)
    return tuple(events)


def timeline_length(glyphs: int, fast_mode: bool = False) -> int:
    """Length of the timeline compiled from a pattern of *glyphs* entries."""
    if fast_mode:
        return 4 * glyphs + 3
    return 5 * glyphs + 5
