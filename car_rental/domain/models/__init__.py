from .make import Make
from .car import Car
from .customer import Customer
from .rental import Rental
from .user import User

__all__ = ["Make", "Car", "Customer", "Rental", "User"]
