from __future__ import annotations

from dataclasses import dataclass

from classifieds_lite.domain.listing import ListingQuerySpec, ListingSummary
from classifieds_lite.ports.listing_repository import ListingRepository


@dataclass(frozen=True, slots=True)
class SearchListingsResponse:
    listings: list[ListingSummary]


class SearchListings:
    """
    Listing search with filters and pagination.

    This use case validates the query spec and delegates filtering,
    ordering and primary image resolution to the repository adapter.
    """

    def __init__(self, listing_repository: ListingRepository) -> None:
        self._repository = listing_repository

    def execute(self, query: ListingQuerySpec) -> SearchListingsResponse:
        """
        Execute listing search.

        Validates the spec before delegating to repository.
        This is the single source of validation (contract programming).

        Args:
            query: Filters and paging

        Returns:
            Response containing one page of listing summaries

        Raises:
            ValidationError: If paging or filter parameters are invalid
            BackendError: If the query fails
        """
        query.validate()

        return SearchListingsResponse(listings=self._repository.search(query))
