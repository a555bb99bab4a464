"""Pattern generator - constrained-random glyph activation order."""
from __future__ import annotations

import random

from tick_blast.arena import adjacent, are_adjacent
from tick_blast.config import check_glyph_count
from tick_blast.types import Element, Pattern


def generate_pattern(count: int, rng: random.Random) -> Pattern:
    """Pick *count* glyphs, each adjacent to the one before it.

    The first glyph is uniform over all four quadrants. Every later glyph is
    uniform over the two quadrants sharing an edge with its predecessor, so
    the pattern never repeats a glyph back to back and never jumps
    diagonally.
    """
    check_glyph_count(count)
    choices: list[Element] = [rng.choice(list(Element))]
    while len(choices) < count:
        choices.append(rng.choice(adjacent(choices[-1])))
    return tuple(choices)


def is_valid_pattern(pattern: Pattern) -> bool:
    """True if the pattern is non-empty and every consecutive pair is adjacent."""
    if not pattern:
        return False
    return all(are_adjacent(a, b) for a, b in zip(pattern, pattern[1:]))
