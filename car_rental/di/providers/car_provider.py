from typing import TYPE_CHECKING
from ...domain.repositories.car_repository import CarRepository
from ...domain.repositories.make_repository import MakeRepository
from ...domain.repositories.rental_repository import RentalRepository
from ...application.services.car_service import CarService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CarProvider:
    """Car service provider - registers car-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register car service.
        Service is created with repositories from container.
        """
        container.register_singleton(
            CarService,
            CarService(
                car_repository=container.get(CarRepository),
                make_repository=container.get(MakeRepository),
                rental_repository=container.get(RentalRepository),
            )
        )
