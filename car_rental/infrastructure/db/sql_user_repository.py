"""
SQL User Repository
===================

Concrete implementation of UserRepository using SQLAlchemy.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from car_rental.domain.exceptions import Conflict
from car_rental.domain.lookup import ById, ByUsername, UserKey
from car_rental.domain.models.user import User
from car_rental.domain.repositories.user_repository import UserRepository
from car_rental.infrastructure.db.database import Database
from car_rental.infrastructure.db.models import UserRecord


class SqlUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository."""

    def __init__(self, database: Database):
        self._database = database

    def _to_entity(self, record: UserRecord) -> User:
        return User(id=record.id, username=record.username, password=record.password)

    def create(self, user: User) -> User:
        try:
            with self._database.session_scope() as session:
                record = UserRecord(username=user.username, password=user.password)
                session.add(record)
                session.flush()
                return self._to_entity(record)
        except IntegrityError as exc:
            raise Conflict("username", user.username) from exc

    def find(self, key: UserKey) -> Optional[User]:
        if isinstance(key, ById):
            condition = UserRecord.id == key.id
        elif isinstance(key, ByUsername):
            condition = UserRecord.username == key.username
        else:
            raise TypeError(f"Unsupported user lookup key: {key!r}")

        with self._database.session_scope() as session:
            record = session.scalars(select(UserRecord).where(condition)).first()
            return self._to_entity(record) if record else None

    def find_all(self) -> List[User]:
        with self._database.session_scope() as session:
            records = session.scalars(select(UserRecord).order_by(UserRecord.id))
            return [self._to_entity(record) for record in records]

    def exists(self, user_id: int) -> bool:
        with self._database.session_scope() as session:
            return session.get(UserRecord, user_id) is not None
