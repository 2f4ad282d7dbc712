# main.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from vacuum.cleaning.walker import GridWalker
from vacuum.entities.execution import Execution
from vacuum.persistence.db import create_db_engine, create_schema
from vacuum.persistence.recorder import ExecutionRecorder
from vacuum.utils.consts import (
    DATABASE_URL,
    DURATION_PRECISION,
    LOG_LEVEL,
    SERVER_HOST,
    SERVER_PORT,
)
from vacuum.utils.enums import Direction
from vacuum.utils.errors import StorageError
from vacuum.utils.logs import configure_logging
from vacuum.utils.types import Command, Position, WalkRequest

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema creation runs on every boot; existing tables are left alone
    configure_logging(LOG_LEVEL)
    engine = create_db_engine(DATABASE_URL)
    create_schema(engine)
    app.state.recorder = ExecutionRecorder(engine)
    logger.info("Robot vacuum server ready")
    yield
    engine.dispose()


app = FastAPI(title="Robot Vacuum Path Service", lifespan=lifespan)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class PositionInput(BaseModel):
    x: int
    y: int

class CommandInput(BaseModel):
    direction: Direction
    steps: int = Field(ge=0)

class PathInput(BaseModel):
    start: PositionInput
    commands: List[CommandInput]

    def to_walk_request(self) -> WalkRequest:
        return WalkRequest(
            start=Position(self.start.x, self.start.y),
            commands=[Command(c.direction, c.steps) for c in self.commands],
        )

class PathOutput(BaseModel):
    id: Optional[int] = None
    timestamp: Optional[datetime] = None
    commands: int
    result: int
    duration: Optional[str] = None

    @classmethod
    def from_execution(cls, execution: Execution) -> "PathOutput":
        """Localize the UTC timestamp and render duration as fixed-point seconds"""
        timestamp = execution.timestamp.astimezone() if execution.timestamp else None
        duration = None
        if execution.duration is not None:
            duration = f"{execution.duration:.{DURATION_PRECISION}f}"
        return cls(
            id=execution.id,
            timestamp=timestamp,
            commands=execution.commands,
            result=execution.result,
            duration=duration,
        )


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_recorder(request: Request) -> ExecutionRecorder:
    return request.app.state.recorder


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Robot vacuum server is running"}


@app.post("/path", response_model=PathOutput)
def enter_path(input_data: PathInput, recorder: ExecutionRecorder = Depends(get_recorder)):
    """
    Walk the robot along the submitted commands, store the run and
    return the stored execution.
    """
    execution = GridWalker().walk(input_data.to_walk_request())
    try:
        execution = recorder.save(execution)
    except StorageError as e:
        logger.exception("Path request failed")
        raise HTTPException(status_code=500, detail="Unable to save execution") from e
    return PathOutput.from_execution(execution)


if __name__ == "__main__":
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
