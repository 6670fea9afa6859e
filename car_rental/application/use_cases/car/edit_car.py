"""
Edit Car Use Case
=================

Business use case for changing a car's catalog data.
"""
import logging
from typing import Optional

from car_rental.domain.exceptions import NotFound
from car_rental.domain.lookup import ById
from car_rental.domain.models.car import Car
from car_rental.domain.repositories.car_repository import CarRepository
from car_rental.domain.repositories.make_repository import MakeRepository
from car_rental.utils.slug_utils import make_slug

logger = logging.getLogger(__name__)


class EditCarUseCase:
    """
    Use case for partially updating a car.

    Changing `units` does not affect rentals that are already open.
    """

    def __init__(self, car_repository: CarRepository, make_repository: MakeRepository):
        self._cars = car_repository
        self._makes = make_repository

    def execute(
        self,
        car_id: int,
        model: Optional[str] = None,
        make_id: Optional[int] = None,
        price_per_day: Optional[float] = None,
        units: Optional[int] = None,
    ) -> Car:
        """
        Execute the edit car use case. Arguments left as None are unchanged.

        Returns:
            Updated car entity

        Raises:
            NotFound: If the car or the new make does not exist
            Conflict: If the new model name collides with another car's slug
        """
        car = self._cars.find(ById(car_id))
        if car is None:
            raise NotFound("car", ById(car_id))

        if make_id is not None:
            if not self._makes.exists(make_id):
                raise NotFound("make", ById(make_id))
            car.make_id = make_id
        if model is not None:
            car.model = model
            car.slug = make_slug(model, "model")
        if price_per_day is not None:
            car.price_per_day = price_per_day
        if units is not None:
            car.units = units

        updated = self._cars.update(car)
        logger.info("Car %s updated", updated.id)
        return updated
