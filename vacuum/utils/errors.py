# IN THIS FILE: ERRORS RAISED BY THE CLEANING CORE


class StorageError(Exception):
    """
    Raised when an execution cannot be persisted: the database is unreachable,
    rejects the write, or no pooled connection became available in time.
    The underlying SQLAlchemy error is chained as __cause__.
    """
