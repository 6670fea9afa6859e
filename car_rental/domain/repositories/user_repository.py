"""
User Repository Interface
=========================

Abstract interface for login account data access.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from car_rental.domain.lookup import UserKey
from car_rental.domain.models.user import User


class UserRepository(ABC):
    """Abstract repository for user persistence operations."""

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity whose password is already hashed

        Returns:
            Created user entity with its generated ID

        Raises:
            Conflict: If the username is already taken
        """
        pass

    @abstractmethod
    def find(self, key: UserKey) -> Optional[User]:
        pass

    @abstractmethod
    def find_all(self) -> List[User]:
        pass

    @abstractmethod
    def exists(self, user_id: int) -> bool:
        pass
