# IN THIS FILE: THE EXECUTIONS TABLE AND ENGINE SETUP

import logging

from sqlalchemy import Column, DateTime, Float, Integer, MetaData, Table, create_engine, func
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from vacuum.utils.consts import CONNECTION_POOL_SIZE, DATABASE_URL, POOL_TIMEOUT
from vacuum.utils.errors import StorageError

logger = logging.getLogger(__name__)

metadata = MetaData()

# id and timestamp are filled in by the database, never by the client
executions = Table(
    "executions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("timestamp", DateTime(timezone=True), server_default=func.now(), nullable=False),
    Column("commands", Integer),
    Column("result", Integer),
    Column("duration", Float, nullable=True),
)


def create_db_engine(
    url: str = DATABASE_URL,
    pool_size: int = CONNECTION_POOL_SIZE,
    pool_timeout: float = POOL_TIMEOUT,
) -> Engine:
    """
    Build the engine behind the recorder.

    Server databases get a bounded pool: once `pool_size` connections are
    checked out, callers wait up to `pool_timeout` seconds and then fail.
    SQLite keeps SQLAlchemy's default pooling.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
    )


def create_schema(engine: Engine) -> None:
    """Create the executions table if it does not exist yet (safe on every boot)"""
    try:
        metadata.create_all(engine)
    except SQLAlchemyError as e:
        raise StorageError(f"Unable to create schema: {e}") from e
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))
