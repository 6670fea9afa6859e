"""
Rental Model
============

Domain model representing one unit of a car rented by a customer.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from car_rental.domain.billing import duration_days, rental_cost
from car_rental.domain.exceptions import AlreadyClosed
from car_rental.utils.datetime_utils import now


@dataclass
class Rental:
    """
    Rental domain model.

    A rental is open while `rental_end` is None. It is closed exactly once
    and never re-opened.
    """
    car_id: int
    customer_id: int
    rental_start: datetime
    rental_end: Optional[datetime] = None
    id: Optional[int] = None

    def is_open(self) -> bool:
        """Check if the car is still out."""
        return self.rental_end is None

    def close(self, ended_at: Optional[datetime] = None) -> None:
        """
        Close the rental.

        Raises:
            AlreadyClosed: If the rental was returned before
        """
        if not self.is_open():
            raise AlreadyClosed(self.id)
        self.rental_end = ended_at or now()

    def duration(self, as_of: Optional[datetime] = None) -> int:
        """Started days, measured up to the end or to `as_of` (default now) while open."""
        return duration_days(self.rental_start, self.rental_end, as_of or now())

    def cost(self, price_per_day: float, as_of: Optional[datetime] = None) -> float:
        """Charge for the rental at the given daily price."""
        return rental_cost(price_per_day, self.duration(as_of))
