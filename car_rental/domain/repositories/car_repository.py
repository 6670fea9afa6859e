"""
Car Repository Interface
========================

Abstract interface for car data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from car_rental.domain.lookup import CarKey
from car_rental.domain.models.car import Car


@dataclass(frozen=True)
class CarFilter:
    """
    Criteria for listing cars. All given criteria must match.

    `make_ids` of None means any make; an empty sequence matches nothing.
    `min_price_per_day` is inclusive, `max_price_per_day` exclusive.
    """
    make_ids: Optional[Sequence[int]] = None
    min_price_per_day: Optional[float] = None
    max_price_per_day: Optional[float] = None


class CarRepository(ABC):
    """
    Abstract repository for car persistence operations.

    This interface defines the contract for car data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def create(self, car: Car) -> Car:
        """
        Create a new car.

        Args:
            car: Car entity to create

        Returns:
            Created car entity with its generated ID

        Raises:
            Conflict: If the slug is already taken
        """
        pass

    @abstractmethod
    def update(self, car: Car) -> Car:
        """
        Update an existing car.

        Args:
            car: Car entity with updated data

        Returns:
            Updated car entity

        Raises:
            NotFound: If the car no longer exists
            Conflict: If the new slug is already taken
        """
        pass

    @abstractmethod
    def find(self, key: CarKey) -> Optional[Car]:
        """
        Find a car by ID or slug.

        Args:
            key: ById or BySlug lookup key

        Returns:
            Car entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self, criteria: Optional[CarFilter] = None) -> List[Car]:
        """
        List cars matching the criteria.

        Args:
            criteria: Optional filter; None lists every car

        Returns:
            List of car entities ordered by ID
        """
        pass

    @abstractmethod
    def find_by_make(self, make_id: int) -> List[Car]:
        pass
