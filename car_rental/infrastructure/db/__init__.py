"""
Relational Persistence
======================

SQLAlchemy engine handling, table mappings and repository implementations.
"""
from .database import Database
from .sql_make_repository import SqlMakeRepository
from .sql_car_repository import SqlCarRepository
from .sql_customer_repository import SqlCustomerRepository
from .sql_rental_repository import SqlRentalRepository
from .sql_user_repository import SqlUserRepository

__all__ = [
    "Database",
    "SqlMakeRepository",
    "SqlCarRepository",
    "SqlCustomerRepository",
    "SqlRentalRepository",
    "SqlUserRepository",
]
