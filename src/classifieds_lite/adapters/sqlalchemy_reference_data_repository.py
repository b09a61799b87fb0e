from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from classifieds_lite.domain.errors import BackendError
from classifieds_lite.infra.db.models import CategoryRow, UserRow
from classifieds_lite.ports.reference_data_repository import ReferenceDataRepository


class SqlAlchemyReferenceDataRepository(ReferenceDataRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def category_exists(self, category_id: int) -> bool:
        query = select(CategoryRow.id).where(CategoryRow.id == category_id)
        try:
            return self._session.execute(query).first() is not None
        except SQLAlchemyError as exc:
            raise BackendError("Category lookup failed", operation="category_exists") from exc

    def user_exists(self, subject_id: str) -> bool:
        query = select(UserRow.id).where(UserRow.id == subject_id)
        try:
            return self._session.execute(query).first() is not None
        except SQLAlchemyError as exc:
            raise BackendError("User lookup failed", operation="user_exists") from exc
