"""Player movement against solid blocks."""

from __future__ import annotations

import itertools
from dataclasses import dataclass

Vec3 = tuple[float, float, float]

PLAYER_SIZE: Vec3 = (0.6, 1.8, 0.6)
_SKIN = 0.0001

_NON_SOLID = frozenset(
    {
        0, 6, 8, 9, 10, 11, 27, 28, 30, 31, 32, 36, 37, 38, 39, 40, 50, 51,
        55, 59, 63, 66, 68, 69, 70, 72, 75, 76, 77, 83, 90, 104, 105, 106,
        115, 119, 131, 132, 141, 142, 143, 147, 148, 157, 175,
    }
)


def is_solid(block: int) -> bool:
    """Whether a block id blocks movement."""
    return block not in _NON_SOLID


@dataclass(frozen=True)
class Aabb:
    """An axis-aligned box given by its lowest and highest corners."""

    min: Vec3
    max: Vec3

    def translated(self, dx: float, dy: float, dz: float) -> Aabb:
        """Return the box moved by the given offset."""
        offset = (dx, dy, dz)
        return Aabb(
            tuple(c + d for c, d in zip(self.min, offset)),
            tuple(c + d for c, d in zip(self.max, offset)),
        )

    def collides(self, other: Aabb) -> bool:
        """Whether the two boxes overlap; touching faces do not count."""
        return all(
            o_min < s_max and o_max > s_min
            for s_min, s_max, o_min, o_max in zip(self.min, self.max, other.min, other.max)
        )

    def move_out_of(self, other: Aabb, direction: Vec3) -> Aabb:
        """Return this box pushed back against ``other``, opposite to ``direction``."""
        low, high = list(self.min), list(self.max)
        for axis, step in enumerate(direction):
            if step > 0:
                new_high = other.min[axis] - _SKIN
                low[axis] += new_high - high[axis]
                high[axis] = new_high
            elif step < 0:
                new_low = other.max[axis] + _SKIN
                high[axis] += new_low - low[axis]
                low[axis] = new_low
        return Aabb(tuple(low), tuple(high))


_UNIT_CUBE = Aabb((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))


def next_player_position(world, position: Vec3, velocity: Vec3) -> Vec3:
    """Move a player by ``velocity``, stopping at solid blocks of ``world``.

    ``world`` provides ``get_block(x, y, z)`` returning a block id.
    """
    start = tuple(p + v for p, v in zip(position, velocity))
    bounds = Aabb(start, tuple(s + e for s, e in zip(start, PLAYER_SIZE)))

    low = [int(c) - 1 for c in bounds.min]
    high = [int(c) + 1 for c in bounds.max]

    cells = itertools.product(
        range(low[1], high[1]), range(low[2], high[2]), range(low[0], high[0])
    )
    for y, z, x in cells:
        if is_solid(world.get_block(x, y, z)):
            block = _UNIT_CUBE.translated(x, y, z)
            if block.collides(bounds):
                bounds = bounds.move_out_of(block, velocity)

    return bounds.min