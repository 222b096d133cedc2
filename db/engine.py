"""
db.engine - Engine bootstrap and session factory.

Designed so the connection string can be swapped to Postgres
by changing config.DB_URL; no other code needs to change.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from db.models import Base

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def init_db(db_url: str) -> None:
    """
    Create the engine, apply SQLite pragmas, and emit CREATE TABLE for
    any table that does not exist yet.  Safe to call again on an
    initialised database: existing tables and rows are left untouched.

    Replaces any engine from an earlier call; its pool is disposed.
    """
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()

    _engine = create_engine(db_url, echo=False, future=True)

    if "sqlite" in db_url:
        @event.listens_for(_engine, "connect")
        def _sqlite_pragmas(dbapi_conn, _rec):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA journal_mode=WAL")
            cur.execute("PRAGMA foreign_keys=ON")
            cur.execute("PRAGMA synchronous=NORMAL")
            cur.close()

    Base.metadata.create_all(_engine, checkfirst=True)
    _SessionLocal = sessionmaker(bind=_engine, expire_on_commit=False)
    logger.info(f"Database ready: {_engine.url.render_as_string(hide_password=True)}")


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialised - call init_db() first")
    return _engine


def get_session() -> Session:
    """Return a new session.  Caller is responsible for .close()."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialised - call init_db() first")
    return _SessionLocal()


def sqlite_url(environment: str, path: str | Path | None = None) -> str:
    """
    Build the SQLite URL for an environment's database file:
    ``<path>/<environment>.db`` or ``<environment>.db`` in the working
    directory when no path is given.
    """
    if not environment:
        raise ValueError("environment must be a non-empty name")
    if path is None:
        return f"sqlite:///{environment}.db"
    return f"sqlite:///{Path(path) / f'{environment}.db'}"


def create_db(environment: str, path: str | Path | None = None) -> str:
    """
    Create (or reopen) the environment's SQLite database and return its
    URL.  Like init_db, this switches get_session() to that database.
    """
    if path is not None:
        Path(path).mkdir(parents=True, exist_ok=True)
    url = sqlite_url(environment, path)
    init_db(url)
    return url
