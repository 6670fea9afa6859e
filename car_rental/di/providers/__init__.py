"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .security_provider import SecurityProvider
from .make_provider import MakeProvider
from .car_provider import CarProvider
from .customer_provider import CustomerProvider
from .user_provider import UserProvider
from .rental_provider import RentalProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "SecurityProvider",
    "MakeProvider",
    "CarProvider",
    "CustomerProvider",
    "UserProvider",
    "RentalProvider",
]
