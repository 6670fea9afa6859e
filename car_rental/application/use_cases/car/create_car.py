"""
Create Car Use Case
===================

Business use case for adding a car model to the catalog.
"""
import logging

from car_rental.domain.exceptions import NotFound
from car_rental.domain.lookup import ById
from car_rental.domain.models.car import Car
from car_rental.domain.repositories.car_repository import CarRepository
from car_rental.domain.repositories.make_repository import MakeRepository
from car_rental.utils.slug_utils import make_slug

logger = logging.getLogger(__name__)


class CreateCarUseCase:
    """Use case for creating a car with a slug derived from its model name."""

    def __init__(self, car_repository: CarRepository, make_repository: MakeRepository):
        self._cars = car_repository
        self._makes = make_repository

    def execute(self, model: str, make_id: int, price_per_day: float, units: int) -> Car:
        """
        Execute the create car use case.

        Args:
            model: Model name
            make_id: Make building the model
            price_per_day: Daily rental price
            units: Number of units owned

        Returns:
            Created car entity

        Raises:
            NotFound: If the make does not exist
            Conflict: If another car already has the same slug
        """
        if not self._makes.exists(make_id):
            raise NotFound("make", ById(make_id))

        car = self._cars.create(
            Car(
                make_id=make_id,
                model=model,
                slug=make_slug(model, "model"),
                price_per_day=price_per_day,
                units=units,
            )
        )
        logger.info("Car %s (%s) created with %s unit(s)", car.id, car.slug, car.units)
        return car
