from typing import TYPE_CHECKING
from ...domain.repositories.make_repository import MakeRepository
from ...domain.repositories.car_repository import CarRepository
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.repositories.rental_repository import RentalRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.database import Database
from ...infrastructure.db.sql_make_repository import SqlMakeRepository
from ...infrastructure.db.sql_car_repository import SqlCarRepository
from ...infrastructure.db.sql_customer_repository import SqlCustomerRepository
from ...infrastructure.db.sql_rental_repository import SqlRentalRepository
from ...infrastructure.db.sql_user_repository import SqlUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the database handle from the database provider and creates repository instances.
        """
        database = container.get(Database)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(MakeRepository, SqlMakeRepository(database))
        container.register_singleton(CarRepository, SqlCarRepository(database))
        container.register_singleton(CustomerRepository, SqlCustomerRepository(database))
        container.register_singleton(RentalRepository, SqlRentalRepository(database))
        container.register_singleton(UserRepository, SqlUserRepository(database))
