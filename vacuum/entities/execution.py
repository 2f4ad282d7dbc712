# IN THIS FILE: THE EXECUTION RECORD (ONE ROW PER ROBOT RUN)

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Execution:
    """
    Outcome of a single robot run.

    `id` and `timestamp` belong to the database and stay None until the
    record has been saved. `timestamp` is always kept in UTC and only
    localized when rendered.
    """
    commands: int = 0
    result: int = 0
    duration: Optional[float] = None
    id: Optional[int] = None
    timestamp: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Execution":
        """Build an execution from a stored `executions` row"""
        timestamp = row["timestamp"]
        if timestamp is not None:
            # SQLite hands back naive CURRENT_TIMESTAMP values, which are UTC
            if timestamp.tzinfo is None:
                timestamp = timestamp.replace(tzinfo=timezone.utc)
            else:
                timestamp = timestamp.astimezone(timezone.utc)
        duration = row["duration"]
        return cls(
            commands=row["commands"],
            result=row["result"],
            duration=float(duration) if duration is not None else None,
            id=row["id"],
            timestamp=timestamp,
        )

    @property
    def is_saved(self) -> bool:
        return self.id is not None and self.timestamp is not None

    def get_dict(self) -> dict:
        """Convert to dictionary (timestamp left as datetime)"""
        return asdict(self)
