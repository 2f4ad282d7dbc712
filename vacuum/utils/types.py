# IN THIS FILE: POSITION, COMMAND, WALK REQUEST

from dataclasses import dataclass, field
from typing import List

from vacuum.utils.consts import FIELD_LIMIT
from vacuum.utils.enums import Direction


@dataclass(frozen=True)
class Position:
    """
    A single vertex on the 2D grid.
    Immutable and hashable so visited cells can be kept in a set.
    """
    x: int
    y: int

    @classmethod
    def from_direction(cls, direction: Direction) -> "Position":
        """Unit displacement for one step in `direction`"""
        dx, dy = direction.displacement
        return cls(dx, dy)

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def shift(self, direction: Direction) -> "Position":
        """
        Move one step towards `direction`.

        Returns:
            The neighbouring position, or this very position when the step
            would leave the field.
        """
        destination = self + Position.from_direction(direction)
        if destination.out_of_bounds():
            return self
        return destination

    def out_of_bounds(self) -> bool:
        """True if either coordinate lies beyond FIELD_LIMIT"""
        return abs(self.x) > FIELD_LIMIT or abs(self.y) > FIELD_LIMIT

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Command:
    """Take `steps` unit steps towards `direction`"""
    direction: Direction
    steps: int


@dataclass
class WalkRequest:
    """Starting position plus the ordered commands the robot executes"""
    start: Position
    commands: List[Command] = field(default_factory=list)
