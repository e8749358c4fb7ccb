"""
Database engine and session management.
"""

from contextlib import contextmanager
from typing import Generator, Optional

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import get_settings


class Base(DeclarativeBase):
    """Base for all ORM models."""


_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    SQLite needs check_same_thread disabled when used from a threaded web
    server; in-memory SQLite additionally needs a single shared connection.
    """
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def init_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """Create (or replace) the global engine and session factory."""
    global _engine, _session_factory
    settings = get_settings()
    url = database_url or settings.database_url
    if _engine is not None:
        _engine.dispose()
    _engine = create_db_engine(url, echo=settings.debug if echo is None else echo)
    _session_factory = sessionmaker(
        bind=_engine,
        autoflush=False,
        expire_on_commit=False,
    )
    logger.debug(f"Database engine initialized for {_engine.url.render_as_string(hide_password=True)}")
    return _engine


def get_engine() -> Engine:
    """Get or create global engine."""
    if _engine is None:
        init_engine()
    return _engine


def get_session_factory() -> sessionmaker:
    if _session_factory is None:
        init_engine()
    return _session_factory


def create_tables(engine: Optional[Engine] = None) -> None:
    """Create all tables that do not exist yet."""
    # Importing models registers them on Base.metadata
    from . import models  # noqa: F401

    Base.metadata.create_all(engine or get_engine())


def drop_tables(engine: Optional[Engine] = None) -> None:
    from . import models  # noqa: F401

    Base.metadata.drop_all(engine or get_engine())


def get_session() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a session and closes it afterwards.
    Services commit their own units of work.
    """
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """
    Context manager for non-request usage such as the CLI and seeding.
    Commits on success, rolls back on error.
    """
    session = get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
