"""
Rental Service
==============

Application service for the rental ledger: renting, returning and the
derived duration, cost and outstanding balance.
"""
from datetime import datetime
from typing import List, Optional

from car_rental.application.use_cases.rental.rent_car import RentCarUseCase
from car_rental.application.use_cases.rental.return_car import ReturnCarUseCase
from car_rental.domain.billing import outstanding_balance
from car_rental.domain.exceptions import NotFound
from car_rental.domain.lookup import ById
from car_rental.domain.models.rental import Rental
from car_rental.domain.repositories.car_repository import CarRepository
from car_rental.domain.repositories.customer_repository import CustomerRepository
from car_rental.domain.repositories.rental_repository import RentalRepository
from car_rental.utils.datetime_utils import now


class RentalService:
    """
    Application service for rental operations.

    Costs are computed from the car's current daily price each time they
    are read; nothing monetary is stored on the rental.
    """

    def __init__(
        self,
        rental_repository: RentalRepository,
        car_repository: CarRepository,
        customer_repository: CustomerRepository,
    ):
        self._repository = rental_repository
        self._cars = car_repository
        self._rent_use_case = RentCarUseCase(car_repository, customer_repository, rental_repository)
        self._return_use_case = ReturnCarUseCase(rental_repository)

    def rent_car(self, car_id: int, customer_id: int) -> Rental:
        """
        Open a rental of one unit of the car.

        Raises:
            NotFound: If the car or the customer does not exist
            CapacityExceeded: If every unit is rented out
        """
        return self._rent_use_case.execute(car_id, customer_id)

    def return_car(self, rental_id: int) -> Rental:
        """
        Close a rental.

        Raises:
            NotFound: If the rental does not exist
            AlreadyClosed: If it was already returned
        """
        return self._return_use_case.execute(rental_id)

    def get_rental(self, rental_id: int) -> Optional[Rental]:
        return self._repository.find_by_id(rental_id)

    def list_rentals(self) -> List[Rental]:
        return self._repository.find_all()

    def list_rentals_for_car(self, car_id: int) -> List[Rental]:
        return self._repository.find_by_car(car_id)

    def list_rentals_for_customer(self, customer_id: int) -> List[Rental]:
        return self._repository.find_by_customer(customer_id)

    def duration(self, rental: Rental, as_of: Optional[datetime] = None) -> int:
        """Started days of the rental; open rentals are measured up to `as_of` (default now)."""
        return rental.duration(as_of or now())

    def cost(self, rental: Rental, as_of: Optional[datetime] = None) -> float:
        """
        Charge for the rental at the car's current daily price.

        Raises:
            NotFound: If the rented car no longer exists
        """
        return rental.cost(self._price_per_day(rental.car_id), as_of or now())

    def outstanding_balance(self, customer_id: int, as_of: Optional[datetime] = None) -> float:
        """
        Sum of the costs of the customer's open rentals.

        Returned rentals are not included.
        """
        reference = as_of or now()
        open_rentals = self._repository.find_by_customer(customer_id, open_only=True)
        return outstanding_balance(
            (self._price_per_day(rental.car_id), rental.duration(reference))
            for rental in open_rentals
        )

    def _price_per_day(self, car_id: int) -> float:
        car = self._cars.find(ById(car_id))
        if car is None:
            raise NotFound("car", ById(car_id))
        return car.price_per_day
