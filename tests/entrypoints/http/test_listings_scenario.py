"""
End-to-end scenarios through the real app against an in-memory SQLite catalog.

Only get_db is overridden; routing, caller identity, mapping, use cases,
repositories and the SQL they emit all run for real.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from classifieds_lite.entrypoints.http.app import build_app
from classifieds_lite.entrypoints.http.dependencies import get_db
from classifieds_lite.infra.db.models import CategoryRow, ListingRow


class FailingCommitSession(Session):
    def commit(self) -> None:
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))


def _client_for(session_factory: sessionmaker[Session]) -> TestClient:
    def _get_db() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app = build_app()
    app.dependency_overrides[get_db] = _get_db
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def client(engine: Engine) -> Iterator[TestClient]:
    with _client_for(sessionmaker(bind=engine, expire_on_commit=False)) as test_client:
        yield test_client


@pytest.fixture
def iphone(add_listing: Callable[..., ListingRow]) -> ListingRow:
    return add_listing(
        "iPhone 14 Pro",
        created_at=datetime(2024, 5, 1, 10, 0),
        price=250000,
        city="Lahore",
        category="electronics",
        images=[("https://img/iphone-2.jpg", False), ("https://img/iphone-1.jpg", True)],
    )


def _body(categories: dict[str, CategoryRow], **overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "title": "Walnut dining table",
        "description": "Six seats, minor scratches on one leg",
        "price": 45000,
        "city": "Lahore",
        "categoryId": categories["furniture"].id,
    }
    body.update(overrides)
    return body


def test_search_by_city_and_status(client: TestClient, iphone: ListingRow) -> None:
    response = client.get("/listings", params={"city": "Lahore", "status": "active"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data) == 1
    assert data[0]["id"] == iphone.id
    assert data[0]["title"] == "iPhone 14 Pro"
    assert data[0]["price"] == 250000
    assert data[0]["category"] == "Electronics"
    assert data[0]["primaryImageUrl"] == "https://img/iphone-1.jpg"


def test_search_with_no_match_is_empty_success(client: TestClient, iphone: ListingRow) -> None:
    response = client.get("/listings", params={"city": "Karachi"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


def test_search_limit_above_ceiling_is_rejected(client: TestClient, iphone: ListingRow) -> None:
    response = client.get("/listings", params={"limit": 100})

    assert response.status_code == 400
    assert any(detail["field"] == "limit" for detail in response.json()["details"])


def test_create_uses_caller_as_owner_and_appears_first(
    client: TestClient,
    db_session: Session,
    categories: dict[str, CategoryRow],
    seller_id: str,
    iphone: ListingRow,
) -> None:
    response = client.post(
        "/listings",
        json=_body(categories, ownerId="attacker"),
        headers={"X-Auth-Subject": seller_id},
    )

    assert response.status_code == 201
    new_id = response.json()["id"]

    owner = db_session.scalar(select(ListingRow.owner_id).where(ListingRow.id == new_id))
    assert owner == seller_id

    first_page = client.get("/listings", params={"offset": 0}).json()["data"]
    assert [item["id"] for item in first_page] == [new_id, iphone.id]
    assert first_page[0]["category"] == "Furniture"
    assert first_page[0]["primaryImageUrl"] is None


def test_create_by_unknown_user_is_forbidden(
    client: TestClient, db_session: Session, categories: dict[str, CategoryRow]
) -> None:
    response = client.post(
        "/listings", json=_body(categories), headers={"X-Auth-Subject": "user_nobody"}
    )

    assert response.status_code == 403
    assert db_session.scalars(select(ListingRow.id)).all() == []


def test_create_with_unknown_category_is_400(
    client: TestClient, categories: dict[str, CategoryRow], seller_id: str
) -> None:
    response = client.post(
        "/listings",
        json=_body(categories, categoryId=9999),
        headers={"X-Auth-Subject": seller_id},
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "categoryId"


def test_create_without_identity_is_401(
    client: TestClient, categories: dict[str, CategoryRow]
) -> None:
    response = client.post("/listings", json=_body(categories))

    assert response.status_code == 401


def test_failed_commit_is_a_500_and_nothing_is_saved(
    engine: Engine,
    db_session: Session,
    categories: dict[str, CategoryRow],
    seller_id: str,
) -> None:
    factory = sessionmaker(bind=engine, class_=FailingCommitSession, expire_on_commit=False)

    with _client_for(factory) as failing_client:
        response = failing_client.post(
            "/listings", json=_body(categories), headers={"X-Auth-Subject": seller_id}
        )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "code": "BACKEND_ERROR"}
    assert db_session.scalars(select(ListingRow.id)).all() == []


def test_price_beyond_64_bits_is_400(
    client: TestClient, categories: dict[str, CategoryRow], seller_id: str
) -> None:
    response = client.post(
        "/listings",
        json=_body(categories, price=2**63),
        headers={"X-Auth-Subject": seller_id},
    )

    assert response.status_code == 400
    assert [detail["field"] for detail in response.json()["details"]] == ["price"]
