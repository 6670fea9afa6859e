"""
GraphQL Context
===============

Per-request context handing the application services to resolvers.
"""
from fastapi import Depends
from strawberry.fastapi import BaseContext

from car_rental.api.v1.dependencies import (
    get_car_service,
    get_customer_service,
    get_make_service,
    get_rental_service,
    get_user_service,
)
from car_rental.application.services.car_service import CarService
from car_rental.application.services.customer_service import CustomerService
from car_rental.application.services.make_service import MakeService
from car_rental.application.services.rental_service import RentalService
from car_rental.application.services.user_service import UserService


class GraphQLContext(BaseContext):
    """Services available to every resolver through `info.context`."""

    def __init__(
        self,
        make_service: MakeService,
        car_service: CarService,
        customer_service: CustomerService,
        rental_service: RentalService,
        user_service: UserService,
    ):
        super().__init__()
        self.make_service = make_service
        self.car_service = car_service
        self.customer_service = customer_service
        self.rental_service = rental_service
        self.user_service = user_service


async def get_context(
    make_service: MakeService = Depends(get_make_service),
    car_service: CarService = Depends(get_car_service),
    customer_service: CustomerService = Depends(get_customer_service),
    rental_service: RentalService = Depends(get_rental_service),
    user_service: UserService = Depends(get_user_service),
) -> GraphQLContext:
    """Build the resolver context from FastAPI dependencies."""
    return GraphQLContext(
        make_service=make_service,
        car_service=car_service,
        customer_service=customer_service,
        rental_service=rental_service,
        user_service=user_service,
    )
