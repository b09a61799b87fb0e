from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from classifieds_lite.domain.listing import DEFAULT_LIMIT, MAX_LIMIT, ListingStatus


class ListingSearchQueryDTO(BaseModel):
    """Query parameters for searching listings."""

    city: str | None = Field(
        default=None,
        description="Filter by city (exact match)",
        examples=["Lahore"],
        max_length=100,
    )
    category: str | None = Field(
        default=None,
        description="Filter by category slug (exact match)",
        examples=["electronics"],
        max_length=100,
    )
    status: ListingStatus | None = Field(
        default=None,
        description="Filter by listing status",
        examples=["active"],
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive substring match on the title",
        examples=["iphone"],
        max_length=200,
    )
    limit: int = Field(
        default=DEFAULT_LIMIT,
        description="Maximum number of results to return",
        examples=[10],
        ge=1,
        le=MAX_LIMIT,
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "city": "Lahore",
                "category": "electronics",
                "status": "active",
                "search": "iphone",
                "limit": 10,
                "offset": 0,
            }
        },
    )


class ListingSummaryDTO(BaseModel):
    id: int
    title: str
    price: int
    city: str | None
    status: ListingStatus
    created_at: datetime
    category: str | None
    primary_image_url: str | None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListingSearchResponseDTO(BaseModel):
    success: bool = True
    data: list[ListingSummaryDTO]
