from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.security.password_hasher import PasswordHasher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the password hasher configured from settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = container.get(Settings)
        container.register_singleton(PasswordHasher, PasswordHasher(rounds=settings.bcrypt_rounds))
