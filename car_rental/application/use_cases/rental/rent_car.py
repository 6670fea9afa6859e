"""
Rent Car Use Case
=================

Business use case for handing one unit of a car to a customer.
"""
import logging

from car_rental.domain.exceptions import CapacityExceeded, NotFound
from car_rental.domain.lookup import ById
from car_rental.domain.models.rental import Rental
from car_rental.domain.repositories.car_repository import CarRepository
from car_rental.domain.repositories.customer_repository import CustomerRepository
from car_rental.domain.repositories.rental_repository import RentalRepository
from car_rental.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class RentCarUseCase:
    """
    Use case for opening a rental.

    Checks run in a fixed order: the car must exist, it must have a free
    unit, and the customer must exist. The insert itself re-checks the
    capacity atomically, so a concurrent rent of the last unit loses with
    CapacityExceeded instead of over-booking the car.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        customer_repository: CustomerRepository,
        rental_repository: RentalRepository,
    ):
        """
        Initialize use case with repositories.

        Args:
            car_repository: Repository for the car catalog
            customer_repository: Repository for the customer directory
            rental_repository: Repository for rentals
        """
        self._cars = car_repository
        self._customers = customer_repository
        self._rentals = rental_repository

    def execute(self, car_id: int, customer_id: int) -> Rental:
        """
        Execute the rent car use case.

        Args:
            car_id: Car to rent
            customer_id: Customer renting it

        Returns:
            The created open rental

        Raises:
            NotFound: If the car or the customer does not exist
            CapacityExceeded: If every unit of the car is rented out
        """
        car = self._cars.find(ById(car_id))
        if car is None:
            raise NotFound("car", ById(car_id))

        if not car.has_capacity(self._rentals.count_open_for_car(car.id)):
            logger.warning("Rejected rent of car %s: no unit available", car.id)
            raise CapacityExceeded(car.id)

        if self._customers.find_by_id(customer_id) is None:
            raise NotFound("customer", ById(customer_id))

        rental = self._rentals.create_if_available(
            Rental(car_id=car.id, customer_id=customer_id, rental_start=now())
        )
        if rental is None:
            logger.warning("Rejected rent of car %s: last unit taken concurrently", car.id)
            raise CapacityExceeded(car.id)

        logger.info("Rental %s opened: car %s to customer %s", rental.id, car.id, customer_id)
        return rental
