"""Player movement toward a target tile."""
from __future__ import annotations

from tick_blast.types import Tile


def _axis_step(delta: int) -> int:
    if abs(delta) <= 2:
        return delta
    size = 1 if delta % 2 else 2
    return size if delta > 0 else -size


def step_delta(player: Tile, target: Tile) -> Tile:
    """Per-axis displacement for one tick.

    Within two tiles the axis snaps to the target. Further out it moves one
    tile when the remaining distance is odd and two when it is even, so the
    player always lands exactly on the target.
    """
    return _axis_step(target[0] - player[0]), _axis_step(target[1] - player[1])


def step_toward(player: Tile, target: Tile) -> Tile:
    dx, dy = step_delta(player, target)
    return player[0] + dx, player[1] + dy


def lookahead_offset(dx: int, dy: int) -> Tile:
    """Offset of the tile one step ahead along a move of (dx, dy)."""
    def unit(d: int) -> int:
        if abs(d) == 2:
            return d // 2
        return d

    return unit(dx), unit(dy)
