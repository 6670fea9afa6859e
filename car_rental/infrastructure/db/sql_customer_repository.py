"""
SQL Customer Repository
=======================

Concrete implementation of CustomerRepository using SQLAlchemy.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from car_rental.domain.exceptions import NotFound
from car_rental.domain.lookup import ById
from car_rental.domain.models.customer import Customer
from car_rental.domain.repositories.customer_repository import CustomerRepository
from car_rental.infrastructure.db.database import Database
from car_rental.infrastructure.db.models import CustomerRecord


class SqlCustomerRepository(CustomerRepository):
    """SQLAlchemy implementation of CustomerRepository."""

    def __init__(self, database: Database):
        self._database = database

    def _to_entity(self, record: CustomerRecord) -> Customer:
        return Customer(
            id=record.id,
            user_id=record.user_id,
            first_name=record.first_name,
            last_name=record.last_name,
        )

    def _apply(self, record: CustomerRecord, customer: Customer) -> None:
        record.user_id = customer.user_id
        record.first_name = customer.first_name
        record.last_name = customer.last_name

    def create(self, customer: Customer) -> Customer:
        try:
            with self._database.session_scope() as session:
                record = CustomerRecord()
                self._apply(record, customer)
                session.add(record)
                session.flush()
                return self._to_entity(record)
        except IntegrityError as exc:
            # user_id is the only constrained column
            raise NotFound("user", ById(customer.user_id)) from exc

    def update(self, customer: Customer) -> Customer:
        try:
            with self._database.session_scope() as session:
                record = session.get(CustomerRecord, customer.id)
                if record is None:
                    raise NotFound("customer", ById(customer.id))
                self._apply(record, customer)
                session.flush()
                return self._to_entity(record)
        except IntegrityError as exc:
            raise NotFound("user", ById(customer.user_id)) from exc

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        with self._database.session_scope() as session:
            record = session.get(CustomerRecord, customer_id)
            return self._to_entity(record) if record else None

    def find_by_user_id(self, user_id: int) -> Optional[Customer]:
        with self._database.session_scope() as session:
            record = session.scalars(
                select(CustomerRecord).where(CustomerRecord.user_id == user_id).order_by(CustomerRecord.id)
            ).first()
            return self._to_entity(record) if record else None

    def find_all(self) -> List[Customer]:
        with self._database.session_scope() as session:
            records = session.scalars(select(CustomerRecord).order_by(CustomerRecord.id))
            return [self._to_entity(record) for record in records]
