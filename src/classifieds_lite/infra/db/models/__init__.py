from classifieds_lite.infra.db.models.base import Base
from classifieds_lite.infra.db.models.category import CategoryRow
from classifieds_lite.infra.db.models.image import ImageRow
from classifieds_lite.infra.db.models.listing import ListingRow
from classifieds_lite.infra.db.models.user import UserRow

__all__ = ["Base", "CategoryRow", "ImageRow", "ListingRow", "UserRow"]
