"""
SQL Rental Repository
=====================

Concrete implementation of RentalRepository using SQLAlchemy.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from car_rental.domain.models.rental import Rental
from car_rental.domain.repositories.rental_repository import RentalRepository
from car_rental.infrastructure.db.database import Database
from car_rental.infrastructure.db.models import CarRecord, RentalRecord
from car_rental.utils.datetime_utils import ensure_aware, to_utc

logger = logging.getLogger(__name__)


class SqlRentalRepository(RentalRepository):
    """
    SQLAlchemy implementation of RentalRepository.

    Timestamps are written in UTC and read back timezone-aware.
    """

    def __init__(self, database: Database):
        """Initialize repository with the shared database handle."""
        self._database = database

    def _to_entity(self, record: RentalRecord) -> Rental:
        """Convert ORM record to Rental entity."""
        return Rental(
            id=record.id,
            car_id=record.car_id,
            customer_id=record.customer_id,
            rental_start=ensure_aware(record.rental_start),
            rental_end=ensure_aware(record.rental_end),
        )

    def _count_open(self, session: Session, car_id: int) -> int:
        return session.scalar(
            select(func.count(RentalRecord.id)).where(
                RentalRecord.car_id == car_id,
                RentalRecord.rental_end.is_(None),
            )
        )

    def create_if_available(self, rental: Rental) -> Optional[Rental]:
        """Insert an open rental if the locked car still has a free unit."""
        with self._database.session_scope() as session:
            car = session.scalars(
                select(CarRecord).where(CarRecord.id == rental.car_id).with_for_update()
            ).first()
            if car is None:
                return None

            open_rentals = self._count_open(session, car.id)
            if open_rentals >= car.units:
                logger.info(
                    "Car %s has no free unit (%s/%s rented)", car.id, open_rentals, car.units
                )
                return None

            record = RentalRecord(
                car_id=rental.car_id,
                customer_id=rental.customer_id,
                rental_start=to_utc(rental.rental_start),
                rental_end=None,
            )
            session.add(record)
            session.flush()
            return self._to_entity(record)

    def close(self, rental_id: int, ended_at: datetime) -> Optional[Rental]:
        """Set rental_end only where it is still null."""
        with self._database.session_scope() as session:
            result = session.execute(
                update(RentalRecord)
                .where(RentalRecord.id == rental_id, RentalRecord.rental_end.is_(None))
                .values(rental_end=to_utc(ended_at))
            )
            if result.rowcount == 0:
                return None
            record = session.get(RentalRecord, rental_id, populate_existing=True)
            return self._to_entity(record)

    def find_by_id(self, rental_id: int) -> Optional[Rental]:
        with self._database.session_scope() as session:
            record = session.get(RentalRecord, rental_id)
            return self._to_entity(record) if record else None

    def find_all(self) -> List[Rental]:
        with self._database.session_scope() as session:
            records = session.scalars(select(RentalRecord).order_by(RentalRecord.id))
            return [self._to_entity(record) for record in records]

    def find_by_car(self, car_id: int) -> List[Rental]:
        with self._database.session_scope() as session:
            records = session.scalars(
                select(RentalRecord).where(RentalRecord.car_id == car_id).order_by(RentalRecord.id)
            )
            return [self._to_entity(record) for record in records]

    def find_by_customer(self, customer_id: int, open_only: bool = False) -> List[Rental]:
        query = select(RentalRecord).where(RentalRecord.customer_id == customer_id)
        if open_only:
            query = query.where(RentalRecord.rental_end.is_(None))

        with self._database.session_scope() as session:
            records = session.scalars(query.order_by(RentalRecord.id))
            return [self._to_entity(record) for record in records]

    def count_open_for_car(self, car_id: int) -> int:
        with self._database.session_scope() as session:
            return self._count_open(session, car_id)
