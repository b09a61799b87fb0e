from __future__ import annotations

from abc import ABC, abstractmethod

from classifieds_lite.domain.listing import ListingQuerySpec, ListingSummary, NewListing


class ListingRepository(ABC):
    """
    Port for listing data access.

    Contract (Preconditions):
        - query specs and new listings must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
        - Implementations wrap persistence failures in BackendError
    """

    @abstractmethod
    def search(self, query: ListingQuerySpec) -> list[ListingSummary]:
        """
        Return one page of listing summaries, newest first.

        Args:
            query: Filters (AND semantics) and paging - pre-validated

        Returns:
            At most query.paging.limit summaries ordered by created_at DESC, id DESC
        """
        ...

    @abstractmethod
    def add(self, listing: NewListing, owner_id: str) -> int:
        """
        Insert a listing owned by owner_id in a single statement.

        The listing is durable when this returns; a failed write raises
        BackendError and leaves nothing behind.

        Returns:
            The id of the new listing
        """
        ...
