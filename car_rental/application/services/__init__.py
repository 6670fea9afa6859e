from .make_service import MakeService
from .car_service import CarService
from .customer_service import CustomerService
from .rental_service import RentalService
from .user_service import UserService

__all__ = ["MakeService", "CarService", "CustomerService", "RentalService", "UserService"]
