# IN THIS FILE: TRACKING ROBOT'S CURRENT POSITION & CLEANED CELLS

from typing import Set

from vacuum.utils.types import Command, Position


class Robot:
    """
    Tracks the robot's position and every cell it has cleaned.
    """

    def __init__(self, x: int, y: int):
        """
        Initialize robot at starting position.

        The start cell is not counted as cleaned; it only joins the set
        once a step lands on it again.

        Args:
            x, y: Grid coordinates (not validated against the field)
        """
        self.start_position = Position(x, y)
        self.current_position = self.start_position
        self.cleaned: Set[Position] = set()

    def execute(self, command: Command) -> None:
        """
        Walk `command.steps` unit steps, cleaning every cell stood on.

        A step blocked by the field boundary leaves the robot in place but
        still cleans (re-adds) the boundary cell.
        """
        direction = command.direction
        for _ in range(command.steps):
            self.current_position = self.current_position.shift(direction)
            self.cleaned.add(self.current_position)

    def cleaned_count(self) -> int:
        return len(self.cleaned)
