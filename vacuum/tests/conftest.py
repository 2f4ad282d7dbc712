import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from main import app, get_recorder
from vacuum.persistence.db import create_schema
from vacuum.persistence.recorder import ExecutionRecorder


@pytest.fixture
def engine():
    # One shared in-memory database for the whole test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def recorder(engine):
    return ExecutionRecorder(engine)


@pytest.fixture
def client(recorder):
    app.dependency_overrides[get_recorder] = lambda: recorder
    yield TestClient(app)
    app.dependency_overrides.clear()
