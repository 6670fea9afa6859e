"""
Car Model
=========

Domain model representing a rentable car model in the catalog.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from typing import Optional

from car_rental.domain.billing import available_units


@dataclass
class Car:
    """
    Car domain model.

    A car is a model of a make with a number of identical units that can
    be rented out at the same daily price.
    """
    make_id: int
    model: str
    slug: str
    price_per_day: float
    units: int = 0
    id: Optional[int] = None

    def available_units(self, open_rentals: int) -> int:
        """Units still free given the number of open rentals."""
        return available_units(self.units, open_rentals)

    def has_capacity(self, open_rentals: int) -> bool:
        """Check if at least one unit is free."""
        return open_rentals < self.units
