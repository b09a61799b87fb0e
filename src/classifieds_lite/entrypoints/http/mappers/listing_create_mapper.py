from __future__ import annotations

from classifieds_lite.domain.listing import NewListing
from classifieds_lite.entrypoints.http.dtos.listing_create import (
    CreateListingRequestDTO,
    CreateListingResponseDTO,
)
from classifieds_lite.use_cases.create_listing import CreateListingResponse


class ListingCreateMapper:
    """Maps between REST DTOs and domain models for listing creation."""

    @staticmethod
    def to_domain(dto: CreateListingRequestDTO) -> NewListing:
        return NewListing(
            title=dto.title,
            description=dto.description,
            price=dto.price,
            city=dto.city,
            category_id=dto.category_id,
        )

    @staticmethod
    def to_response(result: CreateListingResponse) -> CreateListingResponseDTO:
        return CreateListingResponseDTO(id=result.id)
