from __future__ import annotations

import os


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    # SQLAlchemy 2.x doesn't accept the 'postgres://' scheme
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg://", 1)

    return url


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)

    if raw is None or raw == "":
        return default

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def pool_size() -> int:
    return _int_setting("DB_POOL_SIZE", 10)


def max_overflow() -> int:
    return _int_setting("DB_MAX_OVERFLOW", 20)


def pool_timeout() -> int:
    """Seconds to wait for a pooled connection before giving up."""
    return _int_setting("DB_POOL_TIMEOUT", 30)


def statement_timeout_ms() -> int:
    """Server-side statement timeout applied to every PostgreSQL connection."""
    return _int_setting("DB_STATEMENT_TIMEOUT_MS", 5000)
