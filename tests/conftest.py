"""Shared fixtures: an in-memory SQLite catalog built from the ORM metadata."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterator

import pytest
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from classifieds_lite.domain.listing import ListingStatus
from classifieds_lite.infra.db.models import Base, CategoryRow, ImageRow, ListingRow, UserRow

SELLER_ID = "user_seller_1"


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """Single-connection SQLite engine shared across threads (TestClient)."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    session = Session(engine, expire_on_commit=False)
    yield session
    session.close()


@pytest.fixture()
def seller_id() -> str:
    return SELLER_ID


@pytest.fixture()
def categories(db_session: Session) -> dict[str, CategoryRow]:
    """Reference categories plus one registered seller."""
    rows = {
        "electronics": CategoryRow(slug="electronics", name="Electronics"),
        "furniture": CategoryRow(slug="furniture", name="Furniture"),
        "vehicles": CategoryRow(slug="vehicles", name="Vehicles"),
    }
    db_session.add_all(rows.values())
    db_session.add(UserRow(id=SELLER_ID, name="Seller", email="seller@example.com"))
    db_session.commit()
    return rows


@pytest.fixture()
def add_listing(
    db_session: Session, categories: dict[str, CategoryRow]
) -> Callable[..., ListingRow]:
    """Insert a listing (and optional (url, is_primary) images) and commit."""

    def _add(
        title: str,
        *,
        created_at: datetime,
        price: int = 1000,
        city: str | None = "Lahore",
        status: ListingStatus = ListingStatus.ACTIVE,
        category: str | None = None,
        images: list[tuple[str, bool]] | None = None,
    ) -> ListingRow:
        row = ListingRow(
            title=title,
            description=f"{title} description",
            price=price,
            city=city,
            status=status,
            owner_id=SELLER_ID,
            category_id=categories[category].id if category else None,
            created_at=created_at,
        )
        db_session.add(row)
        db_session.flush()

        for url, is_primary in images or []:
            db_session.add(ImageRow(listing_id=row.id, url=url, is_primary=is_primary))

        db_session.commit()
        return row

    return _add
