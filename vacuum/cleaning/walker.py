# IN THIS FILE: WALKING A REQUEST ACROSS THE GRID AND COUNTING CLEANED CELLS

import logging
import time

from vacuum.entities.execution import Execution
from vacuum.entities.robot import Robot
from vacuum.utils.types import WalkRequest

logger = logging.getLogger(__name__)


class GridWalker:
    """
    Runs every command of a walk request and reports how many distinct
    cells the robot cleaned, along with how long the traversal took.

    Walking never fails: moves that would leave the field are clamped.
    """

    def walk(self, request: WalkRequest) -> Execution:
        """
        Execute `request` from its start position.

        Returns:
            An unsaved Execution with commands, result and duration set
        """
        robot = Robot(request.start.x, request.start.y)

        start_time = time.perf_counter()
        for command in request.commands:
            robot.execute(command)
        duration = time.perf_counter() - start_time

        execution = Execution(
            commands=len(request.commands),
            result=robot.cleaned_count(),
            duration=duration,
        )
        logger.debug(
            "Walked %d commands from %s: %d cells cleaned in %.6fs",
            execution.commands, request.start, execution.result, duration,
        )
        return execution
