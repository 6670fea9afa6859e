from typing import TYPE_CHECKING
from ...domain.repositories.make_repository import MakeRepository
from ...application.services.make_service import MakeService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MakeProvider:
    """Make service provider - registers make-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            MakeService,
            MakeService(make_repository=container.get(MakeRepository)),
        )
