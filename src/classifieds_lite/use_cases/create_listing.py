"""Create listing use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from classifieds_lite.domain.errors import (
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from classifieds_lite.domain.listing import CallerIdentity, NewListing
from classifieds_lite.ports.listing_repository import ListingRepository
from classifieds_lite.ports.reference_data_repository import ReferenceDataRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateListingResponse:
    id: int


class CreateListing:
    """
    Use case for creating a listing on behalf of the authenticated caller.

    Responsibilities:
    - Refuse to run without a caller identity, before touching storage
    - Validate the payload (all offending fields reported together)
    - Check the caller is a known user and the category exists
    - Insert the listing with owner_id taken from the caller identity only
    """

    def __init__(
        self,
        listing_repository: ListingRepository,
        reference_data: ReferenceDataRepository,
    ) -> None:
        self._listings = listing_repository
        self._reference_data = reference_data

    def execute(
        self, caller: CallerIdentity | None, listing: NewListing
    ) -> CreateListingResponse:
        """
        Execute the create listing use case.

        Args:
            caller: Identity attached by the upstream identity provider
            listing: Payload parsed from the request body

        Returns:
            CreateListingResponse with the new listing id

        Raises:
            UnauthorizedError: If no caller identity is present
            ValidationError: If the payload is invalid or the category is unknown
            ForbiddenError: If the caller is not a registered user
            BackendError: If storage fails
        """
        if caller is None or not caller.subject_id:
            raise UnauthorizedError("Authentication required")

        listing.validate()

        if not self._reference_data.category_exists(listing.category_id):
            raise ValidationError(
                errors=[
                    {
                        "field": "categoryId",
                        "message": "Category does not exist",
                        "code": "UNKNOWN_CATEGORY",
                    }
                ]
            )

        if not self._reference_data.user_exists(caller.subject_id):
            raise ForbiddenError("Caller is not a registered user")

        listing_id = self._listings.add(listing, owner_id=caller.subject_id)

        logger.info(
            "Listing created",
            extra={"listing_id": listing_id, "owner_id": caller.subject_id},
        )

        return CreateListingResponse(id=listing_id)
