"""Tests for OrbField — magical orb spawn, collision, and expiry."""
from __future__ import annotations

import pytest

from tick_blast.arena import FIRE_QUADRANT, LIGHTNING_QUADRANT
from tick_blast.orbs import OrbField
from tick_blast.types import Element


class TestSpawn:
    def test_spawn_takes_quadrant_colour(self) -> None:
        field = OrbField()
        orb = field.spawn((2, 3), tick=4)
        assert orb.element is Element.FIRE
        assert orb.fill == FIRE_QUADRANT.orb_fill
        assert orb.spawn_tick == 4
        assert (2, 3) in field

    def test_off_grid_orb_belongs_to_lightning(self) -> None:
        orb = OrbField().spawn((20, 5), tick=0)
        assert orb.fill == LIGHTNING_QUADRANT.orb_fill

    def test_same_tile_replaces(self) -> None:
        field = OrbField()
        field.spawn((5, 5), tick=1)
        field.spawn((5, 5), tick=3)
        assert len(field) == 1
        assert field.at((5, 5)).spawn_tick == 3  # type: ignore[union-attr]

    def test_invalid_lifetime(self) -> None:
        with pytest.raises(ValueError):
            OrbField(lifetime=0)


class TestCollide:
    def test_collide_removes(self) -> None:
        field = OrbField()
        field.spawn((1, 1), tick=0)
        orb = field.collide((1, 1))
        assert orb is not None
        assert (1, 1) not in field

    def test_collide_empty_tile(self) -> None:
        assert OrbField().collide((1, 1)) is None


class TestExpire:
    def test_lives_six_ticks(self) -> None:
        field = OrbField()
        field.spawn((7, 7), tick=10)
        for tick in range(10, 16):
            assert field.expire(tick) == []
            assert (7, 7) in field
        expired = field.expire(16)
        assert [o.tile for o in expired] == [(7, 7)]
        assert (7, 7) not in field

    def test_skipped_tick_still_expires(self) -> None:
        field = OrbField()
        field.spawn((7, 7), tick=0)
        field.expire(9)
        assert len(field) == 0

    def test_only_old_orbs_expire(self) -> None:
        field = OrbField()
        field.spawn((1, 1), tick=0)
        field.spawn((2, 2), tick=3)
        field.expire(6)
        assert field.tiles() == frozenset({(2, 2)})

    def test_clear(self) -> None:
        field = OrbField()
        field.spawn((1, 1), tick=0)
        field.spawn((2, 2), tick=0)
        field.clear()
        assert len(field) == 0
