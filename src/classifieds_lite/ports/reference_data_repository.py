from __future__ import annotations

from abc import ABC, abstractmethod


class ReferenceDataRepository(ABC):
    """
    Read-only lookups over data this service never creates itself.

    Categories come from seeding/administration and users from the identity
    provider sync.
    """

    @abstractmethod
    def category_exists(self, category_id: int) -> bool: ...

    @abstractmethod
    def user_exists(self, subject_id: str) -> bool: ...
