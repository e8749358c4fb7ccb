"""Persistence layer for PawMart."""

from .session import (
    Base,
    create_db_engine,
    create_tables,
    drop_tables,
    get_engine,
    get_session,
    init_engine,
    session_scope,
)

__all__ = [
    "Base",
    "create_db_engine",
    "create_tables",
    "drop_tables",
    "get_engine",
    "get_session",
    "init_engine",
    "session_scope",
]
