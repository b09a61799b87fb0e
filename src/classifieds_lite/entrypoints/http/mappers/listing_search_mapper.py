from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from classifieds_lite.domain.errors import ValidationError
from classifieds_lite.domain.listing import (
    ListingFilters,
    ListingQuerySpec,
    ListingSummary,
    Paging,
)
from classifieds_lite.entrypoints.http.dtos.listing_search import (
    ListingSearchQueryDTO,
    ListingSearchResponseDTO,
    ListingSummaryDTO,
)
from classifieds_lite.use_cases.search_listings import SearchListingsResponse

INVALID_QUERY_MESSAGE = "Invalid query parameters"


class ListingSearchMapper:
    """Compiles raw query parameters into a ListingQuerySpec and maps results back."""

    @staticmethod
    def to_query_dto(params: Mapping[str, str]) -> ListingSearchQueryDTO:
        """
        Validate raw string parameters.

        Blank values count as absent. Every offending field is reported in a
        single ValidationError; unknown parameters are ignored.

        Args:
            params: Raw query parameters (e.g. request.query_params)

        Returns:
            ListingSearchQueryDTO: Typed, range-checked parameters

        Raises:
            ValidationError: With one entry per invalid parameter
        """
        present = {key: value for key, value in params.items() if value.strip()}

        try:
            return ListingSearchQueryDTO.model_validate(present)
        except PydanticValidationError as exc:
            errors = [
                {
                    "field": ".".join(str(loc) for loc in error["loc"]),
                    "message": error["msg"],
                    "code": error["type"],
                }
                for error in exc.errors()
            ]
            raise ValidationError(INVALID_QUERY_MESSAGE, errors=errors) from None

    @staticmethod
    def to_domain_query(dto: ListingSearchQueryDTO) -> ListingQuerySpec:
        return ListingQuerySpec(
            filters=ListingFilters(
                city=dto.city,
                category=dto.category,
                status=dto.status,
                search=dto.search,
            ),
            paging=Paging(offset=dto.offset, limit=dto.limit),
        )

    @staticmethod
    def to_query_spec(params: Mapping[str, str]) -> ListingQuerySpec:
        """Convenience method: raw parameters straight to a domain query spec."""
        return ListingSearchMapper.to_domain_query(ListingSearchMapper.to_query_dto(params))

    @staticmethod
    def to_summary_response(listing: ListingSummary) -> ListingSummaryDTO:
        return ListingSummaryDTO(
            id=listing.id,
            title=listing.title,
            price=listing.price,
            city=listing.city,
            status=listing.status,
            created_at=listing.created_at,
            category=listing.category,
            primary_image_url=listing.primary_image_url,
        )

    @staticmethod
    def to_response(result: SearchListingsResponse) -> ListingSearchResponseDTO:
        return ListingSearchResponseDTO(
            data=[ListingSearchMapper.to_summary_response(item) for item in result.listings],
        )
