"""Dependency helper that exposes the read DB session generator.

Recipe catalog lookups done by search, generation and validation only read,
so endpoints inject `get_db_read` and are routed to the read engine.
"""

from .database import get_read_session


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()
