from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from classifieds_lite.domain.listing import (
    ListingFilters,
    ListingQuerySpec,
    ListingStatus,
    ListingSummary,
    NewListing,
)
from classifieds_lite.ports.listing_repository import ListingRepository
from classifieds_lite.ports.reference_data_repository import ReferenceDataRepository


@dataclass
class StoredImage:
    url: str
    is_primary: bool = False


@dataclass
class StoredListing:
    id: int
    title: str
    price: int
    created_at: datetime
    description: str = ""
    city: str | None = None
    status: ListingStatus = ListingStatus.ACTIVE
    owner_id: str | None = None
    category_slug: str | None = None
    category_name: str | None = None
    images: list[StoredImage] = field(default_factory=list)


class InMemoryListingRepository(ListingRepository, ReferenceDataRepository):
    """
    Canonical contract implementation for tests.

    - Applies AND-semantics filtering
    - Orders newest first with id as tie-break
    - Applies paging AFTER filtering and ordering
    - Resolves the first primary-flagged image per listing
    """

    def __init__(
        self,
        listings: list[StoredListing] | None = None,
        categories: dict[int, tuple[str, str]] | None = None,
        users: set[str] | None = None,
    ) -> None:
        self.listings = list(listings or [])
        # category id -> (slug, name)
        self.categories = dict(categories or {})
        self.users = set(users or ())

    def search(self, query: ListingQuerySpec) -> list[ListingSummary]:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [item for item in self.listings if self._matches(item, query.filters)]
        matches.sort(key=lambda item: (item.created_at, item.id), reverse=True)

        start = query.paging.offset
        end = query.paging.offset + query.paging.limit

        return [self._to_summary(item) for item in matches[start:end]]

    def add(self, listing: NewListing, owner_id: str) -> int:
        new_id = max((item.id for item in self.listings), default=0) + 1
        slug, name = self.categories.get(listing.category_id, (None, None))
        self.listings.append(
            StoredListing(
                id=new_id,
                title=listing.title,
                description=listing.description,
                price=listing.price,
                city=listing.city,
                owner_id=owner_id,
                category_slug=slug,
                category_name=name,
                created_at=datetime.now(timezone.utc),
            )
        )
        return new_id

    def category_exists(self, category_id: int) -> bool:
        return category_id in self.categories

    def user_exists(self, subject_id: str) -> bool:
        return subject_id in self.users

    def _matches(self, item: StoredListing, filters: ListingFilters) -> bool:
        if filters.city is not None and item.city != filters.city:
            return False
        if filters.status is not None and item.status != filters.status:
            return False
        if filters.category is not None and item.category_slug != filters.category:
            return False
        if filters.search is not None and filters.search.lower() not in item.title.lower():
            return False
        return True

    def _to_summary(self, item: StoredListing) -> ListingSummary:
        primary = next((image.url for image in item.images if image.is_primary), None)
        return ListingSummary(
            id=item.id,
            title=item.title,
            price=item.price,
            city=item.city,
            status=item.status,
            created_at=item.created_at,
            category=item.category_name,
            primary_image_url=primary,
        )
