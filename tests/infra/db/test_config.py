from __future__ import annotations

import pytest

from classifieds_lite.infra.db import config


def test_database_url_missing_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        config.database_url()


def test_database_url_is_returned_as_is(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://app:secret@db:5432/classifieds")

    assert config.database_url() == "postgresql+psycopg://app:secret@db:5432/classifieds"


def test_database_url_normalises_postgres_scheme(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgres://app:secret@db:5432/classifieds")

    assert config.database_url() == "postgresql+psycopg://app:secret@db:5432/classifieds"


@pytest.mark.parametrize(
    ("getter", "default"),
    [
        (config.pool_size, 10),
        (config.max_overflow, 20),
        (config.pool_timeout, 30),
        (config.statement_timeout_ms, 5000),
    ],
)
def test_pool_settings_defaults(
    monkeypatch: pytest.MonkeyPatch, getter, default: int  # type: ignore[no-untyped-def]
) -> None:
    for name in ("DB_POOL_SIZE", "DB_MAX_OVERFLOW", "DB_POOL_TIMEOUT", "DB_STATEMENT_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)

    assert getter() == default


def test_pool_size_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_SIZE", "3")

    assert config.pool_size() == 3


def test_blank_setting_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_STATEMENT_TIMEOUT_MS", "")

    assert config.statement_timeout_ms() == 5000


def test_non_integer_setting_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_MAX_OVERFLOW", "lots")

    with pytest.raises(RuntimeError, match="DB_MAX_OVERFLOW must be an integer"):
        config.max_overflow()
