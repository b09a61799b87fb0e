"""SQLAlchemy implementation of ListingRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, insert, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from classifieds_lite.domain.errors import BackendError
from classifieds_lite.domain.listing import (
    ListingFilters,
    ListingQuerySpec,
    ListingSummary,
    NewListing,
)
from classifieds_lite.infra.db.models import CategoryRow, ImageRow, ListingRow
from classifieds_lite.ports.listing_repository import ListingRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input only ever matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlAlchemyListingRepository(ListingRepository):
    """
    SQLAlchemy implementation of ListingRepository.

    - One SELECT per page: listings LEFT JOIN categories, with the primary
      image URL resolved by a correlated scalar subquery (no N+1)
    - Filters are collected as parameterized predicates and AND-ed together
    - Ordered by created_at DESC, id DESC so pages are stable across ties
    - Converts result rows (infrastructure) to ListingSummary (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, query: ListingQuerySpec) -> list[ListingSummary]:
        """
        Run the listing query for one page.

        Note:
            Assumes inputs are validated by UseCase (contract programming).
        """
        statement = self._build_query(query)

        try:
            rows = self._session.execute(statement).all()
        except SQLAlchemyError as exc:
            raise BackendError("Listing search failed", operation="search") from exc

        return [self._to_domain(row) for row in rows]

    def add(self, listing: NewListing, owner_id: str) -> int:
        """
        Insert one listing and commit it.

        The commit happens here rather than in request teardown, which may
        run after the response has been sent.

        Raises:
            BackendError: If the insert or the commit fails
        """
        statement = (
            insert(ListingRow)
            .values(
                title=listing.title,
                description=listing.description,
                price=listing.price,
                city=listing.city,
                category_id=listing.category_id,
                owner_id=owner_id,
            )
            .returning(ListingRow.id)
        )

        try:
            listing_id = self._session.execute(statement).scalar_one()
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise BackendError("Listing insert failed", operation="add") from exc

        return listing_id

    def _build_query(self, query: ListingQuerySpec) -> Select[Any]:
        """
        Build the page query.

        Args:
            query: Filters and paging to apply

        Returns:
            SQLAlchemy select statement with WHERE, ORDER BY, OFFSET and LIMIT
        """
        primary_image_url = (
            select(ImageRow.url)
            .where(ImageRow.listing_id == ListingRow.id)
            .where(ImageRow.is_primary.is_(True))
            .order_by(ImageRow.id)
            .limit(1)
            .correlate(ListingRow)
            .scalar_subquery()
        )

        return (
            select(
                ListingRow.id,
                ListingRow.title,
                ListingRow.price,
                ListingRow.city,
                ListingRow.status,
                ListingRow.created_at,
                CategoryRow.name.label("category"),
                primary_image_url.label("primary_image_url"),
            )
            .select_from(ListingRow)
            .outerjoin(CategoryRow, ListingRow.category_id == CategoryRow.id)
            # true() keeps an empty filter set unconditional
            .where(and_(true(), *self._predicates(query.filters)))
            .order_by(ListingRow.created_at.desc(), ListingRow.id.desc())
            .offset(query.paging.offset)
            .limit(query.paging.limit)
        )

    def _predicates(self, filters: ListingFilters) -> list[ColumnElement[bool]]:
        predicates: list[ColumnElement[bool]] = []

        # Exact matches, aligned with ix_listings_city_status
        if filters.city is not None:
            predicates.append(ListingRow.city == filters.city)
        if filters.status is not None:
            predicates.append(ListingRow.status == filters.status)

        if filters.category is not None:
            predicates.append(CategoryRow.slug == filters.category)

        # Case-insensitive substring match on title
        if filters.search is not None:
            predicates.append(
                ListingRow.title.ilike(f"%{escape_like(filters.search)}%", escape="\\")
            )

        return predicates

    def _to_domain(self, row: Any) -> ListingSummary:
        return ListingSummary(
            id=row.id,
            title=row.title,
            price=row.price,
            city=row.city,
            status=row.status,
            created_at=row.created_at,
            category=row.category,
            primary_image_url=row.primary_image_url,
        )
