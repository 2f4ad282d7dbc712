# IN THIS FILE: DIRECTIONS THE ROBOT CAN MOVE IN
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """
    Compass direction of a single robot command.
    Values are the lowercase names used on the wire.
    """
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def __str__(self):
        return self.value

    @property
    def displacement(self) -> Tuple[int, int]:
        """
        Unit (dx, dy) vector for one step in this direction.

        Examples:
            NORTH → (0, 1)
            WEST  → (-1, 0)
        """
        return _DISPLACEMENTS[self]


_DISPLACEMENTS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}
