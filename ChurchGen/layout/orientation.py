"""
orientation.py
The four cardinal directions on the block grid.

X  → east–west in-game (grows east)
Z  → north–south in-game (grows south), stored as the 2-D *y* coordinate
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple


class Orientation(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    # ───────────────────────────────────
    @property
    def direction(self) -> Tuple[int, int]:
        """Unit step (dx, dz) one block towards this direction."""
        return _DIRECTIONS[self]

    def opposite(self) -> "Orientation":
        return Orientation((self.value + 2) % 4)

    def rotated(self, degrees: int) -> "Orientation":
        """
        Turn by *degrees*; positive turns clockwise seen from above
        (NORTH → EAST).  Only multiples of 90 are allowed.
        """
        if degrees % 90 != 0:
            raise ValueError(f"Rotation must be a multiple of 90°, got {degrees}.")
        return Orientation((self.value + degrees // 90) % 4)

    def is_east_west(self) -> bool:
        return self in (Orientation.EAST, Orientation.WEST)


_DIRECTIONS = {
    Orientation.NORTH: (0, -1),
    Orientation.EAST:  (1, 0),
    Orientation.SOUTH: (0, 1),
    Orientation.WEST:  (-1, 0),
}
