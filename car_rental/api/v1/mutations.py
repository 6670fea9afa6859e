"""
GraphQL Mutations
=================

Write operations. Domain errors (not found, capacity, already closed,
conflict) are returned in the payload's `error` field; malformed input
raises and is reported as a GraphQL error.
"""
import logging

import strawberry
from strawberry.types import Info

from car_rental.api.v1.inputs import (
    CreateCarInput,
    CreateCustomerInput,
    CreateMakeInput,
    CreateUserInput,
    EditCarInput,
    EditCustomerInput,
    RentCarInput,
    ReturnCarInput,
    parse_id,
    parse_optional_id,
    validate_request,
)
from car_rental.api.v1.types import (
    Car,
    CreateCarPayload,
    CreateCustomerPayload,
    CreateMakePayload,
    CreateUserPayload,
    Customer,
    EditCarPayload,
    EditCustomerPayload,
    Make,
    Rental,
    RentCarPayload,
    ReturnCarPayload,
    User,
)
from car_rental.application.dto.car_dto import CarCreateRequest, CarEditRequest, MakeCreateRequest
from car_rental.application.dto.customer_dto import (
    CustomerCreateRequest,
    CustomerEditRequest,
    UserCreateRequest,
)
from car_rental.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_make(self, info: Info, input: CreateMakeInput) -> CreateMakePayload:
        request = validate_request(MakeCreateRequest, name=input.name)
        try:
            make = info.context.make_service.create_make(request.name)
        except DomainError as e:
            return CreateMakePayload(error=str(e))
        return CreateMakePayload(make=Make.from_entity(make))

    @strawberry.mutation
    def create_car(self, info: Info, input: CreateCarInput) -> CreateCarPayload:
        request = validate_request(
            CarCreateRequest,
            model=input.model,
            make_id=parse_id(input.make_id, "makeId"),
            price_per_day=input.price_per_day,
            units=input.units,
        )
        try:
            car = info.context.car_service.create_car(
                model=request.model,
                make_id=request.make_id,
                price_per_day=request.price_per_day,
                units=request.units,
            )
        except DomainError as e:
            return CreateCarPayload(error=str(e))
        return CreateCarPayload(car=Car.from_entity(car))

    @strawberry.mutation
    def edit_car(self, info: Info, input: EditCarInput) -> EditCarPayload:
        request = validate_request(
            CarEditRequest,
            id=parse_id(input.id),
            model=input.model,
            make_id=parse_optional_id(input.make_id, "makeId"),
            price_per_day=input.price_per_day,
            units=input.units,
        )
        try:
            car = info.context.car_service.edit_car(
                request.id,
                model=request.model,
                make_id=request.make_id,
                price_per_day=request.price_per_day,
                units=request.units,
            )
        except DomainError as e:
            return EditCarPayload(error=str(e))
        return EditCarPayload(car=Car.from_entity(car))

    @strawberry.mutation
    def create_customer(self, info: Info, input: CreateCustomerInput) -> CreateCustomerPayload:
        request = validate_request(
            CustomerCreateRequest,
            first_name=input.first_name,
            last_name=input.last_name,
            user_id=parse_optional_id(input.user_id, "userId"),
        )
        try:
            customer = info.context.customer_service.create_customer(
                request.first_name,
                request.last_name,
                user_id=request.user_id,
            )
        except DomainError as e:
            return CreateCustomerPayload(error=str(e))
        return CreateCustomerPayload(customer=Customer.from_entity(customer))

    @strawberry.mutation
    def edit_customer(self, info: Info, input: EditCustomerInput) -> EditCustomerPayload:
        set_user_id = input.user_id is not strawberry.UNSET
        request = validate_request(
            CustomerEditRequest,
            id=parse_id(input.id),
            first_name=input.first_name,
            last_name=input.last_name,
            user_id=parse_optional_id(input.user_id, "userId") if set_user_id else None,
            set_user_id=set_user_id,
        )
        try:
            customer = info.context.customer_service.edit_customer(
                request.id,
                first_name=request.first_name,
                last_name=request.last_name,
                user_id=request.user_id,
                set_user_id=request.set_user_id,
            )
        except DomainError as e:
            return EditCustomerPayload(error=str(e))
        return EditCustomerPayload(customer=Customer.from_entity(customer))

    @strawberry.mutation
    def create_user(self, info: Info, input: CreateUserInput) -> CreateUserPayload:
        request = validate_request(UserCreateRequest, username=input.username, password=input.password)
        try:
            user = info.context.user_service.create_user(request.username, request.password)
        except DomainError as e:
            return CreateUserPayload(error=str(e))
        return CreateUserPayload(user=User.from_entity(user))

    @strawberry.mutation
    def rent_car(self, info: Info, input: RentCarInput) -> RentCarPayload:
        car_id = parse_id(input.car_id, "carId")
        customer_id = parse_id(input.customer_id, "customerId")
        try:
            rental = info.context.rental_service.rent_car(car_id, customer_id)
        except DomainError as e:
            logger.info("rentCar rejected: %s", e)
            return RentCarPayload(error=str(e))
        return RentCarPayload(rental=Rental.from_entity(rental))

    @strawberry.mutation
    def return_car(self, info: Info, input: ReturnCarInput) -> ReturnCarPayload:
        rental_id = parse_id(input.rental_id, "rentalId")
        try:
            rental = info.context.rental_service.return_car(rental_id)
        except DomainError as e:
            logger.info("returnCar rejected: %s", e)
            return ReturnCarPayload(error=str(e))
        return ReturnCarPayload(rental=Rental.from_entity(rental))
