from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from classifieds_lite.domain.errors import ValidationError


DEFAULT_LIMIT = 10
MAX_LIMIT = 50

TITLE_MIN_LENGTH = 3
DESCRIPTION_MIN_LENGTH = 10

# Largest amount a BIGINT price column holds
MAX_PRICE = 2**63 - 1


class ListingStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(frozen=True, slots=True)
class CallerIdentity:
    """Trusted identity handed over by the upstream identity provider."""

    subject_id: str


@dataclass(frozen=True, slots=True)
class ListingSummary:
    id: int
    title: str
    price: int
    city: str | None
    status: ListingStatus
    created_at: datetime
    category: str | None = None
    primary_image_url: str | None = None


@dataclass(frozen=True, slots=True)
class ListingFilters:
    city: str | None = None
    category: str | None = None
    status: ListingStatus | None = None
    search: str | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            ValidationError: If filter parameters are invalid
        """
        if self.status is not None and not isinstance(self.status, ListingStatus):
            raise ValidationError(
                errors=[
                    {
                        "field": "status",
                        "message": "Must be one of: active, inactive",
                        "code": "INVALID_VALUE",
                    }
                ]
            )


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = DEFAULT_LIMIT

    def validate(self) -> None:
        """
        Validate paging parameters.

        Every offending field is reported, not only the first one.

        Raises:
            ValidationError: If paging parameters are invalid
        """
        errors = []
        if self.offset < 0:
            errors.append(
                {"field": "offset", "message": "Must be >= 0", "code": "OUT_OF_RANGE"}
            )
        if self.limit <= 0:
            errors.append({"field": "limit", "message": "Must be > 0", "code": "OUT_OF_RANGE"})
        elif self.limit > MAX_LIMIT:
            errors.append(
                {"field": "limit", "message": f"Must be <= {MAX_LIMIT}", "code": "OUT_OF_RANGE"}
            )
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class ListingQuerySpec:
    """Validated, normalised form of a listing search request."""

    filters: ListingFilters = ListingFilters()
    paging: Paging = Paging()

    def validate(self) -> None:
        """
        Validate filters and paging together.

        Raises:
            ValidationError: With the field errors of both parts
        """
        errors: list[dict[str, str]] = []
        for part in (self.filters, self.paging):
            try:
                part.validate()
            except ValidationError as exc:
                errors.extend(exc.errors or [])
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class NewListing:
    title: str
    description: str
    price: int
    city: str
    category_id: int

    def validate(self) -> None:
        """
        Validate the listing payload.

        Raises:
            ValidationError: With one entry per offending field
        """
        errors = []
        if len(self.title.strip()) < TITLE_MIN_LENGTH:
            errors.append(
                {
                    "field": "title",
                    "message": f"Must be at least {TITLE_MIN_LENGTH} characters",
                    "code": "TOO_SHORT",
                }
            )
        if len(self.description.strip()) < DESCRIPTION_MIN_LENGTH:
            errors.append(
                {
                    "field": "description",
                    "message": f"Must be at least {DESCRIPTION_MIN_LENGTH} characters",
                    "code": "TOO_SHORT",
                }
            )
        # bool is an int subclass
        if (
            isinstance(self.price, bool)
            or not isinstance(self.price, int)
            or not 0 < self.price <= MAX_PRICE
        ):
            errors.append(
                {
                    "field": "price",
                    "message": f"Must be a positive integer amount <= {MAX_PRICE}",
                    "code": "OUT_OF_RANGE",
                }
            )
        if not self.city.strip():
            errors.append({"field": "city", "message": "Is required", "code": "REQUIRED"})
        if errors:
            raise ValidationError(errors=errors)
