"""Tests for tick_blast.movement — per-tick step toward the target."""
from __future__ import annotations

import math

import pytest

from tick_blast.movement import lookahead_offset, step_delta, step_toward


class TestStepDelta:
    @pytest.mark.parametrize(
        "delta, step",
        [(0, 0), (1, 1), (2, 2), (-2, -2), (3, 1), (4, 2), (5, 1), (6, 2),
         (-3, -1), (-4, -2), (-7, -1), (-8, -2)],
    )
    def test_axis(self, delta: int, step: int) -> None:
        assert step_delta((10, 10), (10 + delta, 10)) == (step, 0)
        assert step_delta((10, 10), (10, 10 + delta)) == (0, step)

    def test_already_there(self) -> None:
        assert step_toward((4, 7), (4, 7)) == (4, 7)

    def test_snaps_when_close(self) -> None:
        assert step_toward((10, 10), (12, 8)) == (12, 8)


class TestConvergence:
    def test_reaches_target_without_overshoot(self) -> None:
        starts = [(0, 0), (10, 10), (19, 0), (3, 17)]
        targets = [(x, y) for x in range(0, 20, 3) for y in range(0, 20, 4)]
        for start in starts:
            for target in targets:
                bound = math.ceil(max(abs(target[0] - start[0]),
                                      abs(target[1] - start[1])) / 2) + 1
                pos = start
                for _ in range(bound):
                    nxt = step_toward(pos, target)
                    for axis in (0, 1):
                        before = target[axis] - pos[axis]
                        after = target[axis] - nxt[axis]
                        assert abs(after) <= abs(before)
                        assert after == 0 or (after > 0) == (before > 0)
                    pos = nxt
                assert pos == target, (start, target)

    def test_odd_distance_takes_single_step_first(self) -> None:
        assert step_toward((10, 10), (15, 10)) == (11, 10)
        assert step_toward((11, 10), (15, 10)) == (13, 10)
        assert step_toward((13, 10), (15, 10)) == (15, 10)


class TestLookahead:
    def test_reduces_twos(self) -> None:
        assert lookahead_offset(2, 0) == (1, 0)
        assert lookahead_offset(-2, 2) == (-1, 1)

    def test_keeps_ones_and_zeros(self) -> None:
        assert lookahead_offset(1, -1) == (1, -1)
        assert lookahead_offset(0, -2) == (0, -1)
        assert lookahead_offset(1, 2) == (1, 1)
