from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Enum, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from classifieds_lite.domain.listing import ListingStatus
from classifieds_lite.infra.db.models.base import Base


class ListingRow(Base):
    __tablename__ = "listings"
    __table_args__ = (
        # Common filter pair for GET /listings
        Index("ix_listings_city_status", "city", "status"),
        # Trigram GIN index serves title ILIKE '%term%' (needs pg_trgm)
        Index(
            "ix_listings_title_trgm",
            "title",
            postgresql_using="gin",
            postgresql_ops={"title": "gin_trgm_ops"},
        ),
        Index("ix_listings_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Smallest currency unit
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)

    status: Mapped[ListingStatus] = mapped_column(
        Enum(
            ListingStatus,
            name="listing_status",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=ListingStatus.ACTIVE,
        server_default=ListingStatus.ACTIVE.value,
    )
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)

    owner_id: Mapped[str | None] = mapped_column(
        String(255), ForeignKey("users.id"), nullable=True
    )
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id"), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
