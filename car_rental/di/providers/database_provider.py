from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.database import Database

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database provider - single source of truth for the store handle"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database handle in the container.
        This is the ONLY place where the engine is created.
        Change DATABASE_URL, and all repositories automatically use the new store.
        """
        settings = container.get(Settings)
        container.register_singleton(
            Database,
            Database(settings.database_url, echo=settings.database_echo),
        )
