# IN THIS FILE: SAVING EXECUTIONS TO THE DATABASE

import logging

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from vacuum.entities.execution import Execution
from vacuum.persistence.db import executions
from vacuum.utils.errors import StorageError

logger = logging.getLogger(__name__)


class ExecutionRecorder:
    """
    Stores computed executions, one row per run.
    Insert is the only operation; rows are never read back by id,
    updated or deleted afterwards.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def save(self, execution: Execution) -> Execution:
        """
        Insert `execution` and return the stored row.

        Only commands, result and duration are sent; the database assigns
        id and timestamp. Dialects without INSERT ... RETURNING read the new
        row back inside the same transaction.

        Raises:
            StorageError: the insert could not be completed
        """
        values = {
            "commands": execution.commands,
            "result": execution.result,
            "duration": execution.duration,
        }
        try:
            with self.engine.begin() as conn:
                if self.engine.dialect.insert_returning:
                    stmt = insert(executions).values(**values).returning(*executions.c)
                    row = conn.execute(stmt).mappings().one()
                else:
                    inserted = conn.execute(insert(executions).values(**values))
                    (pk,) = inserted.inserted_primary_key
                    stmt = select(executions).where(executions.c.id == pk)
                    row = conn.execute(stmt).mappings().one()
        except SQLAlchemyError as e:
            logger.error("Unable to save execution %s: %s", values, e)
            raise StorageError(f"Unable to save execution: {e}") from e

        saved = Execution.from_row(row)
        logger.debug("Saved execution %d (%d commands, result %d)", saved.id, saved.commands, saved.result)
        return saved
