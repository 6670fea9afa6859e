"""
Car Service
===========

Application service that coordinates car catalog operations.
This service orchestrates multiple use cases.
"""
from typing import List, Optional, Sequence

from car_rental.application.use_cases.car.create_car import CreateCarUseCase
from car_rental.application.use_cases.car.edit_car import EditCarUseCase
from car_rental.domain.exceptions import NotFound
from car_rental.domain.lookup import BySlug, CarKey
from car_rental.domain.models.car import Car
from car_rental.domain.repositories.car_repository import CarFilter, CarRepository
from car_rental.domain.repositories.make_repository import MakeRepository
from car_rental.domain.repositories.rental_repository import RentalRepository


class CarService:
    """
    Application service for car operations.

    This service coordinates the create/edit use cases and the derived
    availability read.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        make_repository: MakeRepository,
        rental_repository: RentalRepository,
    ):
        """
        Initialize service with repositories.

        Args:
            car_repository: Repository for car persistence
            make_repository: Repository for make lookups
            rental_repository: Repository for open rental counts
        """
        self._repository = car_repository
        self._makes = make_repository
        self._rentals = rental_repository
        self._create_use_case = CreateCarUseCase(car_repository, make_repository)
        self._edit_use_case = EditCarUseCase(car_repository, make_repository)

    def create_car(self, model: str, make_id: int, price_per_day: float, units: int) -> Car:
        """
        Create a car.

        Returns:
            Created car entity
        """
        return self._create_use_case.execute(
            model=model,
            make_id=make_id,
            price_per_day=price_per_day,
            units=units,
        )

    def edit_car(
        self,
        car_id: int,
        model: Optional[str] = None,
        make_id: Optional[int] = None,
        price_per_day: Optional[float] = None,
        units: Optional[int] = None,
    ) -> Car:
        """Update the given fields of a car."""
        return self._edit_use_case.execute(
            car_id,
            model=model,
            make_id=make_id,
            price_per_day=price_per_day,
            units=units,
        )

    def get_car(self, key: CarKey) -> Optional[Car]:
        """
        Get a car by ID or slug.

        Returns:
            Car entity if found, None otherwise
        """
        return self._repository.find(key)

    def list_cars(
        self,
        make_id: Optional[int] = None,
        make_slug: Optional[str] = None,
        make_slugs: Optional[Sequence[str]] = None,
        min_price_per_day: Optional[float] = None,
        max_price_per_day: Optional[float] = None,
    ) -> List[Car]:
        """
        List cars with optional filters. All given filters must match.

        Args:
            make_id: Only cars of this make
            make_slug: Only cars of the make with this slug
            make_slugs: Only cars of any make with one of these slugs
            min_price_per_day: Inclusive lower price bound
            max_price_per_day: Exclusive upper price bound

        Raises:
            NotFound: If `make_slug` matches no make
        """
        candidates = []
        if make_id is not None:
            candidates.append({make_id})
        if make_slug is not None:
            make = self._makes.find_by_slug(make_slug)
            if make is None:
                raise NotFound("make", BySlug(make_slug))
            candidates.append({make.id})
        if make_slugs is not None:
            candidates.append({make.id for make in self._makes.find_by_slugs(make_slugs)})

        make_ids = sorted(set.intersection(*candidates)) if candidates else None
        return self._repository.find_all(
            CarFilter(
                make_ids=make_ids,
                min_price_per_day=min_price_per_day,
                max_price_per_day=max_price_per_day,
            )
        )

    def list_cars_by_make(self, make_id: int) -> List[Car]:
        return self._repository.find_by_make(make_id)

    def available_units(self, car: Car) -> int:
        """Units of the car not currently rented out, recomputed on every call."""
        return car.available_units(self._rentals.count_open_for_car(car.id))
