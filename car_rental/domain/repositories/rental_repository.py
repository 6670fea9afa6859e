"""
Rental Repository Interface
===========================

Abstract interface for rental data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from car_rental.domain.models.rental import Rental


class RentalRepository(ABC):
    """
    Abstract repository for rental persistence operations.

    Rentals are only ever inserted open and closed once; there is no
    general update or delete.
    """

    @abstractmethod
    def create_if_available(self, rental: Rental) -> Optional[Rental]:
        """
        Insert an open rental if its car still has a free unit.

        The capacity check and the insert happen in one transaction that
        locks the car, so concurrent calls cannot over-book it.

        Args:
            rental: Open rental entity to insert

        Returns:
            Created rental with its generated ID, or None if every unit
            of the car is rented out (or the car vanished)
        """
        pass

    @abstractmethod
    def close(self, rental_id: int, ended_at: datetime) -> Optional[Rental]:
        """
        Set the end of a rental that is still open.

        Args:
            rental_id: Rental identifier
            ended_at: End timestamp

        Returns:
            Closed rental, or None if no open rental had that ID
        """
        pass

    @abstractmethod
    def find_by_id(self, rental_id: int) -> Optional[Rental]:
        pass

    @abstractmethod
    def find_all(self) -> List[Rental]:
        pass

    @abstractmethod
    def find_by_car(self, car_id: int) -> List[Rental]:
        pass

    @abstractmethod
    def find_by_customer(self, customer_id: int, open_only: bool = False) -> List[Rental]:
        """
        Find rentals of a customer.

        Args:
            customer_id: Customer identifier
            open_only: Only return rentals that have not been returned
        """
        pass

    @abstractmethod
    def count_open_for_car(self, car_id: int) -> int:
        """Count rentals of the car whose end is not set."""
        pass
