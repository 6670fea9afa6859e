from .make_repository import MakeRepository
from .car_repository import CarFilter, CarRepository
from .customer_repository import CustomerRepository
from .rental_repository import RentalRepository
from .user_repository import UserRepository

__all__ = [
    "MakeRepository",
    "CarFilter",
    "CarRepository",
    "CustomerRepository",
    "RentalRepository",
    "UserRepository",
]
