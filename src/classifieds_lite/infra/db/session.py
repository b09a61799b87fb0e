from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from classifieds_lite.infra.db import config

# Lazy initialization - only create engine/session when needed
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def engine_options(url: str) -> dict[str, Any]:
    """
    Build create_engine() keyword arguments for the given database URL.

    Connection Pool Configuration (PostgreSQL):
    - pool_size: Number of connections to keep open (base pool)
    - max_overflow: Additional connections allowed beyond pool_size
    - pool_timeout: Seconds to wait for a free connection
    - pool_pre_ping: Verify connection health before use
    - pool_recycle: Recycle connections after N seconds (prevent stale connections)
    - statement_timeout: Bounds slow or hung queries on the server side

    SQLite (local development, tests) uses SQLAlchemy's default pool.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_size": config.pool_size(),
        "max_overflow": config.max_overflow(),
        "pool_timeout": config.pool_timeout(),
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "connect_args": {"options": f"-c statement_timeout={config.statement_timeout_ms()}"},
    }


def get_engine() -> Engine:
    """Get or create the database engine (lazy initialization)."""
    global _engine
    if _engine is None:
        url = config.database_url()
        _engine = create_engine(url, **engine_options(url))
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
