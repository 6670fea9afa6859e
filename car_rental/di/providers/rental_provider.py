from typing import TYPE_CHECKING
from ...domain.repositories.car_repository import CarRepository
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.repositories.rental_repository import RentalRepository
from ...application.services.rental_service import RentalService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RentalProvider:
    """Rental service provider - registers the rental ledger"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register rental service.
        Service is created with the rental, car and customer repositories.
        """
        container.register_singleton(
            RentalService,
            RentalService(
                rental_repository=container.get(RentalRepository),
                car_repository=container.get(CarRepository),
                customer_repository=container.get(CustomerRepository),
            )
        )
