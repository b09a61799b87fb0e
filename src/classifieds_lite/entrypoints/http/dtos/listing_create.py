from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from classifieds_lite.domain.listing import (
    DESCRIPTION_MIN_LENGTH,
    MAX_PRICE,
    TITLE_MIN_LENGTH,
)


class CreateListingRequestDTO(BaseModel):
    """Request payload for creating a listing.

    The owner is never read from the body; unknown fields such as
    ``ownerId`` are ignored.
    """

    title: str = Field(
        description="Listing title",
        examples=["iPhone 14 Pro"],
        min_length=TITLE_MIN_LENGTH,
        max_length=200,
    )
    description: str = Field(
        description="Free-text description",
        examples=["Lightly used, 256GB, with box"],
        min_length=DESCRIPTION_MIN_LENGTH,
    )
    price: int = Field(
        description="Price in the smallest currency unit",
        examples=[250000],
        gt=0,
        le=MAX_PRICE,
    )
    city: str = Field(
        description="City where the item is located",
        examples=["Lahore"],
        min_length=1,
        max_length=100,
    )
    category_id: int = Field(
        description="Id of an existing category",
        examples=[1],
        gt=0,
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "iPhone 14 Pro",
                "description": "Lightly used, 256GB, with box",
                "price": 250000,
                "city": "Lahore",
                "categoryId": 1,
            }
        },
    )


class CreateListingResponseDTO(BaseModel):
    success: bool = True
    id: int
