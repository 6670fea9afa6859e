"""
Make Repository Interface
=========================

Abstract interface for make data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from car_rental.domain.lookup import MakeKey
from car_rental.domain.models.make import Make


class MakeRepository(ABC):
    """Abstract repository for make persistence operations."""

    @abstractmethod
    def create(self, make: Make) -> Make:
        """
        Create a new make.

        Args:
            make: Make entity to create

        Returns:
            Created make entity with its generated ID

        Raises:
            Conflict: If the slug is already taken
        """
        pass

    @abstractmethod
    def find(self, key: MakeKey) -> Optional[Make]:
        """
        Find a make by ID or name.

        Args:
            key: ById or ByName lookup key

        Returns:
            Make entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[Make]:
        pass

    @abstractmethod
    def find_by_slugs(self, slugs: Sequence[str]) -> List[Make]:
        pass

    @abstractmethod
    def find_all(self) -> List[Make]:
        pass

    @abstractmethod
    def exists(self, make_id: int) -> bool:
        pass
