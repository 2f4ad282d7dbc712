# Saving executions: round-trip through the executions table and failures
from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.pool import QueuePool, StaticPool

from vacuum.entities.execution import Execution
from vacuum.persistence.db import create_db_engine, create_schema, executions
from vacuum.persistence.recorder import ExecutionRecorder
from vacuum.utils.errors import StorageError


def test_saves_and_returns_stored_row(recorder):
    execution = Execution(commands=3, result=144, duration=0.000023)
    saved = recorder.save(execution)

    assert (saved.commands, saved.result, saved.duration) == (3, 144, 0.000023)
    assert saved.id is not None
    assert saved.timestamp is not None
    assert saved.timestamp.tzinfo == timezone.utc
    assert saved.is_saved
    # the record handed in is left untouched
    assert execution.id is None and execution.timestamp is None


def test_ids_are_assigned_by_database(recorder):
    first = recorder.save(Execution(commands=1, result=10, duration=0.1))
    second = recorder.save(Execution(commands=1, result=0, duration=0.2))
    assert second.id > first.id


def test_inserts_exactly_one_row(recorder, engine):
    recorder.save(Execution(commands=2, result=11, duration=None))
    with engine.connect() as conn:
        assert conn.execute(select(func.count()).select_from(executions)).scalar_one() == 1
        row = conn.execute(select(executions)).mappings().one()
    assert row["duration"] is None


def test_saves_without_returning_support(engine, monkeypatch):
    monkeypatch.setattr(engine.dialect, "insert_returning", False)
    saved = ExecutionRecorder(engine).save(Execution(commands=2, result=11, duration=0.5))
    assert saved.id is not None
    assert (saved.commands, saved.result, saved.duration) == (2, 11, 0.5)


def test_missing_table_raises_storage_error():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    with pytest.raises(StorageError) as excinfo:
        ExecutionRecorder(engine).save(Execution(commands=1, result=1, duration=0.1))
    assert excinfo.value.__cause__ is not None


def test_exhausted_pool_raises_storage_error(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'vacuum.db'}",
        poolclass=QueuePool,
        pool_size=1,
        max_overflow=0,
        pool_timeout=0.1,
    )
    create_schema(engine)
    with engine.connect():
        with pytest.raises(StorageError):
            ExecutionRecorder(engine).save(Execution(commands=1, result=1, duration=0.1))
    engine.dispose()


def test_sqlite_engine_from_url(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'runs.db'}")
    create_schema(engine)
    create_schema(engine)  # second boot leaves the table alone
    saved = ExecutionRecorder(engine).save(Execution(commands=1, result=10, duration=0.01))
    assert saved.id == 1
    engine.dispose()


def test_from_row_treats_naive_timestamp_as_utc():
    row = {
        "id": 7,
        "timestamp": datetime(2014, 11, 28, 12, 0, 9),
        "commands": 3,
        "result": 10,
        "duration": 0.5,
    }
    execution = Execution.from_row(row)
    assert execution.timestamp == datetime(2014, 11, 28, 12, 0, 9, tzinfo=timezone.utc)
    assert execution.get_dict()["id"] == 7
