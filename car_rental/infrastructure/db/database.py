"""
Database
========

SQLAlchemy engine and session management.

One Database instance is created per process by the DI container and
handed to every repository; sessions are opened per repository operation.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from car_rental.infrastructure.db.models import Base

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _configure_sqlite(engine: Engine) -> None:
    """
    Make pysqlite honour foreign keys and take the write lock at BEGIN.

    pysqlite defers BEGIN until the first write, which lets two rent
    transactions read the same open-rental count. Emitting BEGIN IMMEDIATE
    serializes writers the way a row lock does on other backends.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(connection):
        connection.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """
    Relational store handle.

    Owns the engine (and its connection pool) and hands out transactional
    sessions.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        """
        Initialize engine and session factory.

        Args:
            url: SQLAlchemy database URL
            echo: Log emitted SQL
        """
        engine_kwargs = {"echo": echo}
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(url):
                # A single shared connection keeps the in-memory database alive
                engine_kwargs["poolclass"] = StaticPool

        self._engine = create_engine(url, **engine_kwargs)
        if self._engine.dialect.name == "sqlite":
            _configure_sqlite(self._engine)

        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        logger.info("Database engine created for %s", self._engine.url.render_as_string(hide_password=True))

    def create_all(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(self._engine)

    def drop_all(self) -> None:
        """Drop every table created by create_all."""
        Base.metadata.drop_all(self._engine)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around a series of operations.

        Commits on success, rolls back and re-raises on error.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """Close all pooled connections."""
        self._engine.dispose()
