from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.security.password_hasher import PasswordHasher
from ...application.services.user_service import UserService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers account-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            UserService,
            UserService(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
            )
        )
