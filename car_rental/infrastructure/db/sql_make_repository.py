"""
SQL Make Repository
===================

Concrete implementation of MakeRepository using SQLAlchemy.
"""
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from car_rental.domain.exceptions import Conflict
from car_rental.domain.lookup import ById, ByName, MakeKey
from car_rental.domain.models.make import Make
from car_rental.domain.repositories.make_repository import MakeRepository
from car_rental.infrastructure.db.database import Database
from car_rental.infrastructure.db.models import MakeRecord


class SqlMakeRepository(MakeRepository):
    """SQLAlchemy implementation of MakeRepository."""

    def __init__(self, database: Database):
        self._database = database

    def _to_entity(self, record: MakeRecord) -> Make:
        return Make(id=record.id, name=record.name, slug=record.slug)

    def create(self, make: Make) -> Make:
        try:
            with self._database.session_scope() as session:
                record = MakeRecord(name=make.name, slug=make.slug)
                session.add(record)
                session.flush()
                return self._to_entity(record)
        except IntegrityError as exc:
            raise Conflict("slug", make.slug) from exc

    def find(self, key: MakeKey) -> Optional[Make]:
        if isinstance(key, ById):
            condition = MakeRecord.id == key.id
        elif isinstance(key, ByName):
            condition = MakeRecord.name == key.name
        else:
            raise TypeError(f"Unsupported make lookup key: {key!r}")

        with self._database.session_scope() as session:
            record = session.scalars(select(MakeRecord).where(condition).limit(1)).first()
            return self._to_entity(record) if record else None

    def find_by_slug(self, slug: str) -> Optional[Make]:
        with self._database.session_scope() as session:
            record = session.scalars(select(MakeRecord).where(MakeRecord.slug == slug)).first()
            return self._to_entity(record) if record else None

    def find_by_slugs(self, slugs: Sequence[str]) -> List[Make]:
        if not slugs:
            return []
        with self._database.session_scope() as session:
            records = session.scalars(
                select(MakeRecord).where(MakeRecord.slug.in_(list(slugs))).order_by(MakeRecord.id)
            )
            return [self._to_entity(record) for record in records]

    def find_all(self) -> List[Make]:
        with self._database.session_scope() as session:
            records = session.scalars(select(MakeRecord).order_by(MakeRecord.id))
            return [self._to_entity(record) for record in records]

    def exists(self, make_id: int) -> bool:
        with self._database.session_scope() as session:
            return session.get(MakeRecord, make_id) is not None
