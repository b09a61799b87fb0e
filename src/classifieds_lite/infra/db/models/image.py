from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from classifieds_lite.infra.db.models.base import Base


class ImageRow(Base):
    __tablename__ = "images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    listing_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("listings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(Text, nullable=False)
    is_primary: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )


# At most one primary image per listing
Index(
    "uq_images_primary_per_listing",
    ImageRow.listing_id,
    unique=True,
    postgresql_where=ImageRow.is_primary,
    sqlite_where=ImageRow.is_primary,
)
