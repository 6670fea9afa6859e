"""
GraphQL Types
=============

Object types and mutation payloads. Relations and derived values
(availability, duration, cost, balance) are resolved on read through
the services in the request context.
"""
from typing import List, Optional

import strawberry
from strawberry.types import Info

from car_rental.api.v1.scalars import Date
from car_rental.domain import models
from car_rental.domain.lookup import ById


@strawberry.type
class Make:
    id: strawberry.ID
    name: str
    slug: str

    @strawberry.field
    def cars(self, info: Info) -> List["Car"]:
        cars = info.context.car_service.list_cars_by_make(int(self.id))
        return [Car.from_entity(car) for car in cars]

    @classmethod
    def from_entity(cls, make: models.Make) -> "Make":
        return cls(id=strawberry.ID(str(make.id)), name=make.name, slug=make.slug)


@strawberry.type
class Car:
    id: strawberry.ID
    model: str
    slug: str
    price_per_day: float
    units: int
    make_id: strawberry.Private[int]

    @strawberry.field
    def make(self, info: Info) -> Make:
        return Make.from_entity(info.context.make_service.get_make(ById(self.make_id)))

    @strawberry.field
    def rentals(self, info: Info) -> List["Rental"]:
        rentals = info.context.rental_service.list_rentals_for_car(int(self.id))
        return [Rental.from_entity(rental) for rental in rentals]

    @strawberry.field(description="Units not currently rented out.")
    def available_units(self, info: Info) -> int:
        return info.context.car_service.available_units(self.to_entity())

    def to_entity(self) -> models.Car:
        return models.Car(
            id=int(self.id),
            make_id=self.make_id,
            model=self.model,
            slug=self.slug,
            price_per_day=self.price_per_day,
            units=self.units,
        )

    @classmethod
    def from_entity(cls, car: models.Car) -> "Car":
        return cls(
            id=strawberry.ID(str(car.id)),
            model=car.model,
            slug=car.slug,
            price_per_day=car.price_per_day,
            units=car.units,
            make_id=car.make_id,
        )


@strawberry.type
class User:
    id: strawberry.ID
    username: str

    @strawberry.field
    def customer(self, info: Info) -> Optional["Customer"]:
        customer = info.context.customer_service.get_customer_for_user(int(self.id))
        return Customer.from_entity(customer) if customer else None

    @classmethod
    def from_entity(cls, user: models.User) -> "User":
        return cls(id=strawberry.ID(str(user.id)), username=user.username)


@strawberry.type
class Customer:
    id: strawberry.ID
    first_name: str
    last_name: str
    user_id: strawberry.Private[Optional[int]]

    @strawberry.field
    def user(self, info: Info) -> Optional[User]:
        if self.user_id is None:
            return None
        user = info.context.user_service.get_user(ById(self.user_id))
        return User.from_entity(user) if user else None

    @strawberry.field
    def rentals(self, info: Info) -> List["Rental"]:
        rentals = info.context.rental_service.list_rentals_for_customer(int(self.id))
        return [Rental.from_entity(rental) for rental in rentals]

    @strawberry.field(description="Cost of all rentals that are still open.")
    def to_pay(self, info: Info) -> float:
        return info.context.rental_service.outstanding_balance(int(self.id))

    @classmethod
    def from_entity(cls, customer: models.Customer) -> "Customer":
        return cls(
            id=strawberry.ID(str(customer.id)),
            first_name=customer.first_name,
            last_name=customer.last_name,
            user_id=customer.user_id,
        )


@strawberry.type
class Rental:
    id: strawberry.ID
    rental_start: Date
    rental_end: Optional[Date]
    car_id: strawberry.Private[int]
    customer_id: strawberry.Private[int]

    @strawberry.field
    def car(self, info: Info) -> Car:
        return Car.from_entity(info.context.car_service.get_car(ById(self.car_id)))

    @strawberry.field
    def customer(self, info: Info) -> Customer:
        return Customer.from_entity(info.context.customer_service.get_customer(self.customer_id))

    @strawberry.field(description="Started days, up to now while the rental is open.")
    def duration(self, info: Info) -> int:
        return info.context.rental_service.duration(self.to_entity())

    @strawberry.field(description="Price per day of the car times the duration.")
    def cost(self, info: Info) -> float:
        return info.context.rental_service.cost(self.to_entity())

    def to_entity(self) -> models.Rental:
        return models.Rental(
            id=int(self.id),
            car_id=self.car_id,
            customer_id=self.customer_id,
            rental_start=self.rental_start,
            rental_end=self.rental_end,
        )

    @classmethod
    def from_entity(cls, rental: models.Rental) -> "Rental":
        return cls(
            id=strawberry.ID(str(rental.id)),
            rental_start=rental.rental_start,
            rental_end=rental.rental_end,
            car_id=rental.car_id,
            customer_id=rental.customer_id,
        )


@strawberry.type
class CreateMakePayload:
    make: Optional[Make] = None
    error: Optional[str] = None


@strawberry.type
class CreateCarPayload:
    car: Optional[Car] = None
    error: Optional[str] = None


@strawberry.type
class EditCarPayload:
    car: Optional[Car] = None
    error: Optional[str] = None


@strawberry.type
class CreateCustomerPayload:
    customer: Optional[Customer] = None
    error: Optional[str] = None


@strawberry.type
class EditCustomerPayload:
    customer: Optional[Customer] = None
    error: Optional[str] = None


@strawberry.type
class CreateUserPayload:
    user: Optional[User] = None
    error: Optional[str] = None


@strawberry.type
class RentCarPayload:
    rental: Optional[Rental] = None
    error: Optional[str] = None


@strawberry.type
class ReturnCarPayload:
    rental: Optional[Rental] = None
    error: Optional[str] = None
