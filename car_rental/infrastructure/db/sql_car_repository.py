"""
SQL Car Repository
==================

Concrete implementation of CarRepository using SQLAlchemy.
"""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from car_rental.domain.exceptions import Conflict, NotFound
from car_rental.domain.lookup import ById, BySlug, CarKey
from car_rental.domain.models.car import Car
from car_rental.domain.repositories.car_repository import CarFilter, CarRepository
from car_rental.infrastructure.db.database import Database
from car_rental.infrastructure.db.errors import is_unique_violation
from car_rental.infrastructure.db.models import CarRecord

logger = logging.getLogger(__name__)


class SqlCarRepository(CarRepository):
    """
    SQLAlchemy implementation of CarRepository.

    Handles all car persistence operations against the `cars` table.
    """

    def __init__(self, database: Database):
        """Initialize repository with the shared database handle."""
        self._database = database

    def _to_entity(self, record: CarRecord) -> Car:
        """Convert ORM record to Car entity."""
        return Car(
            id=record.id,
            make_id=record.make_id,
            model=record.model,
            slug=record.slug,
            price_per_day=record.price_per_day,
            units=record.units,
        )

    def _apply(self, record: CarRecord, car: Car) -> None:
        record.make_id = car.make_id
        record.model = car.model
        record.slug = car.slug
        record.price_per_day = car.price_per_day
        record.units = car.units

    def _translate(self, exc: IntegrityError, car: Car) -> Exception:
        if is_unique_violation(exc):
            return Conflict("slug", car.slug)
        # The only foreign key on cars points at makes
        logger.warning("Integrity error writing car %s: %s", car.slug, exc.orig)
        return NotFound("make", ById(car.make_id))

    def create(self, car: Car) -> Car:
        """Create a new car."""
        try:
            with self._database.session_scope() as session:
                record = CarRecord()
                self._apply(record, car)
                session.add(record)
                session.flush()
                return self._to_entity(record)
        except IntegrityError as exc:
            raise self._translate(exc, car) from exc

    def update(self, car: Car) -> Car:
        """Update an existing car."""
        try:
            with self._database.session_scope() as session:
                record = session.get(CarRecord, car.id)
                if record is None:
                    raise NotFound("car", ById(car.id))
                self._apply(record, car)
                session.flush()
                return self._to_entity(record)
        except IntegrityError as exc:
            raise self._translate(exc, car) from exc

    def find(self, key: CarKey) -> Optional[Car]:
        """Find a car by its ID or slug."""
        if isinstance(key, ById):
            condition = CarRecord.id == key.id
        elif isinstance(key, BySlug):
            condition = CarRecord.slug == key.slug
        else:
            raise TypeError(f"Unsupported car lookup key: {key!r}")

        with self._database.session_scope() as session:
            record = session.scalars(select(CarRecord).where(condition)).first()
            return self._to_entity(record) if record else None

    def find_all(self, criteria: Optional[CarFilter] = None) -> List[Car]:
        """List cars matching all given criteria."""
        query = select(CarRecord)
        if criteria is not None:
            if criteria.make_ids is not None:
                query = query.where(CarRecord.make_id.in_(list(criteria.make_ids)))
            if criteria.min_price_per_day is not None:
                query = query.where(CarRecord.price_per_day >= criteria.min_price_per_day)
            if criteria.max_price_per_day is not None:
                query = query.where(CarRecord.price_per_day < criteria.max_price_per_day)

        with self._database.session_scope() as session:
            records = session.scalars(query.order_by(CarRecord.id))
            return [self._to_entity(record) for record in records]

    def find_by_make(self, make_id: int) -> List[Car]:
        """Find all cars built by a make."""
        return self.find_all(CarFilter(make_ids=[make_id]))
