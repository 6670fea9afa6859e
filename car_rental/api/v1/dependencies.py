"""
Dependency Container
====================

FastAPI dependencies resolving services from the DI container attached
to the running application.
"""
from fastapi import Depends
from starlette.requests import HTTPConnection

from car_rental.application.services.car_service import CarService
from car_rental.application.services.customer_service import CustomerService
from car_rental.application.services.make_service import MakeService
from car_rental.application.services.rental_service import RentalService
from car_rental.application.services.user_service import UserService
from car_rental.di.container import DIContainer


def get_container(connection: HTTPConnection) -> DIContainer:
    """
    Get the DI container the application was created with.

    Returns:
        DIContainer instance stored on the application state
    """
    return connection.app.state.container


def get_make_service(container: DIContainer = Depends(get_container)) -> MakeService:
    return container.get(MakeService)


def get_car_service(container: DIContainer = Depends(get_container)) -> CarService:
    return container.get(CarService)


def get_customer_service(container: DIContainer = Depends(get_container)) -> CustomerService:
    return container.get(CustomerService)


def get_rental_service(container: DIContainer = Depends(get_container)) -> RentalService:
    return container.get(RentalService)


def get_user_service(container: DIContainer = Depends(get_container)) -> UserService:
    return container.get(UserService)
