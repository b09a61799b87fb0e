"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from classifieds_lite.adapters.sqlalchemy_listing_repository import (
    SqlAlchemyListingRepository,
)
from classifieds_lite.adapters.sqlalchemy_reference_data_repository import (
    SqlAlchemyReferenceDataRepository,
)
from classifieds_lite.infra.db.session import get_session
from classifieds_lite.use_cases.create_listing import CreateListing
from classifieds_lite.use_cases.search_listings import SearchListings


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup (connection returned to the pool on every exit path)

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_search_listings_use_case(db: Session = Depends(get_db)) -> SearchListings:
    """
    Factory function that returns a configured SearchListings use case.

    Called per-request, so each request gets a fresh repository bound to
    its own session.
    """
    return SearchListings(listing_repository=SqlAlchemyListingRepository(session=db))


def get_create_listing_use_case(db: Session = Depends(get_db)) -> CreateListing:
    """Factory function that returns a configured CreateListing use case."""
    return CreateListing(
        listing_repository=SqlAlchemyListingRepository(session=db),
        reference_data=SqlAlchemyReferenceDataRepository(session=db),
    )
