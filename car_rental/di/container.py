# Standard library imports
from typing import Optional

# Local application imports
from car_rental.core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    SecurityProvider,
    MakeProvider,
    CarProvider,
    CustomerProvider,
    UserProvider,
    RentalProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings and database handle (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depend on the database
    3. Password hasher (SecurityProvider) - depends on settings
    4. Services - depend on repositories
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.register_singleton(Settings, settings or get_settings())
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        # Step 1: Register database handle (foundation)
        DatabaseProvider.register(self)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register services (depends on repositories)
        SecurityProvider.register(self)
        MakeProvider.register(self)
        CarProvider.register(self)
        CustomerProvider.register(self)
        UserProvider.register(self)
        RentalProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
