"""
Schema constraints on listing images.

At most one image per listing may be flagged primary; any number of
non-primary images is allowed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from classifieds_lite.infra.db.models import ImageRow, ListingRow


@pytest.fixture()
def listing(add_listing: Callable[..., ListingRow]) -> ListingRow:
    return add_listing("Leather Sofa", created_at=datetime(2024, 3, 1, 9, 0))


def test_second_primary_image_is_rejected(db_session: Session, listing: ListingRow) -> None:
    db_session.add(ImageRow(listing_id=listing.id, url="https://img/sofa-1.jpg", is_primary=True))
    db_session.flush()

    db_session.add(ImageRow(listing_id=listing.id, url="https://img/sofa-2.jpg", is_primary=True))
    with pytest.raises(IntegrityError):
        db_session.flush()


def test_many_non_primary_images_are_accepted(db_session: Session, listing: ListingRow) -> None:
    db_session.add_all(
        [
            ImageRow(listing_id=listing.id, url="https://img/sofa-1.jpg", is_primary=False),
            ImageRow(listing_id=listing.id, url="https://img/sofa-2.jpg", is_primary=False),
            ImageRow(listing_id=listing.id, url="https://img/sofa-3.jpg", is_primary=True),
        ]
    )
    db_session.commit()

    urls = db_session.scalars(select(ImageRow.url).where(ImageRow.listing_id == listing.id)).all()
    assert len(urls) == 3


def test_each_listing_may_have_its_own_primary_image(
    db_session: Session, add_listing: Callable[..., ListingRow]
) -> None:
    first = add_listing(
        "Leather Sofa",
        created_at=datetime(2024, 3, 1, 9, 0),
        images=[("https://img/sofa.jpg", True)],
    )
    second = add_listing(
        "Oak Table",
        created_at=datetime(2024, 3, 1, 9, 5),
        images=[("https://img/table.jpg", True)],
    )

    primaries = db_session.scalars(
        select(ImageRow.listing_id).where(ImageRow.is_primary.is_(True))
    ).all()
    assert sorted(primaries) == sorted([first.id, second.id])
