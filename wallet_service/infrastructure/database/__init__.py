"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base
from .session import dispose_engine, get_engine, get_session, get_session_factory, init_db, ping_database

__all__ = [
    "Base",
    "dispose_engine",
    "get_engine",
    "get_session",
    "get_session_factory",
    "init_db",
    "ping_database",
]
