"""
User Service
============

Application service for login accounts.
"""
import logging
from typing import List, Optional

from car_rental.domain.lookup import UserKey
from car_rental.domain.models.user import User
from car_rental.domain.repositories.user_repository import UserRepository
from car_rental.infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    """Application service for user operations. Passwords are hashed before storage."""

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self._repository = user_repository
        self._hasher = password_hasher

    def create_user(self, username: str, password: str) -> User:
        """
        Create a user account.

        Raises:
            Conflict: If the username is already taken
        """
        user = self._repository.create(User(username=username, password=self._hasher.hash(password)))
        logger.info("User %s (%s) created", user.id, user.username)
        return user

    def get_user(self, key: UserKey) -> Optional[User]:
        return self._repository.find(key)

    def list_users(self) -> List[User]:
        return self._repository.find_all()
