"""Database engine and session management for the showcase API.

This module supports both:
- Local SQLite (default for dev)
- PostgreSQL (or any SQLAlchemy URL) via `DATABASE_URL`

The engine is not a module-level singleton: `create_app()` builds one and
keeps its session factory on the application state.
"""

import os
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Base class for declarative models
Base = declarative_base()


def _is_sqlite_url(database_url: str) -> bool:
    return "sqlite" in (database_url or "")


def _is_sqlite_memory_url(database_url: str) -> bool:
    return _is_sqlite_url(database_url) and (":memory:" in database_url or database_url.rstrip("/") == "sqlite:")


def get_engine_kwargs(database_url: str, echo: bool = False) -> dict:
    """Return deterministic create_engine kwargs for a DB URL.

    This is separated to allow deterministic unit testing without connecting.
    """
    engine_kwargs: dict = {
        "echo": echo,
        "pool_pre_ping": True,
    }

    if _is_sqlite_url(database_url):
        # Request handlers run in a threadpool; SQLite must allow cross-thread use.
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if _is_sqlite_memory_url(database_url):
            # One shared connection, otherwise every checkout sees an empty database.
            engine_kwargs["poolclass"] = StaticPool
        return engine_kwargs

    engine_kwargs["pool_size"] = int(os.getenv("DB_POOL_SIZE", "5"))
    engine_kwargs["max_overflow"] = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    engine_kwargs["pool_timeout"] = int(os.getenv("DB_POOL_TIMEOUT_SEC", "30"))
    return engine_kwargs


def build_engine(database_url: str, echo: bool = False) -> Engine:
    engine = create_engine(database_url, **get_engine_kwargs(database_url, echo=echo))
    if _is_sqlite_url(database_url):
        event.listen(engine, "connect", set_sqlite_pragmas)
    return engine


def _unicode_lower(value):
    return value.lower() if value is not None else None


def set_sqlite_pragmas(dbapi_conn, connection_record):
    """Enable foreign keys so like rows are removed with their project.

    Also replaces SQLite's ASCII-only `lower()`, which `ilike` compiles to,
    with one that folds any Unicode letter.
    """
    dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create any missing tables."""
    # Register the mapped classes on Base.metadata before create_all.
    from showcase.database import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Get database session (dependency for FastAPI)."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
