"""
GraphQL Queries
===============

Read operations over the catalog, the customer directory and the ledger.
"""
from typing import List, Optional

import strawberry
from strawberry.types import Info

from car_rental.api.v1.inputs import parse_id, parse_optional_id, validate_request
from car_rental.api.v1.types import Car, Customer, Make, Rental, User
from car_rental.application.dto.car_dto import CarListRequest
from car_rental.domain.lookup import ById, ByName, BySlug, ByUsername, single_key


def _id_key(value: Optional[strawberry.ID]) -> Optional[ById]:
    return None if value is None else ById(parse_id(value))


@strawberry.type
class Query:
    @strawberry.field(description="Fetch a car by exactly one of ID or slug.")
    def car(
        self,
        info: Info,
        id: Optional[strawberry.ID] = None,
        slug: Optional[str] = None,
    ) -> Optional[Car]:
        key = single_key("car", _id_key(id), None if slug is None else BySlug(slug), "slug")
        car = info.context.car_service.get_car(key)
        return Car.from_entity(car) if car else None

    @strawberry.field(description="List cars; all given filters must match. maxPricePerDay is exclusive.")
    def cars(
        self,
        info: Info,
        make_id: Optional[strawberry.ID] = None,
        make_slug: Optional[str] = None,
        make_slugs: Optional[List[str]] = None,
        min_price_per_day: Optional[float] = None,
        max_price_per_day: Optional[float] = None,
    ) -> List[Car]:
        request = validate_request(
            CarListRequest,
            make_id=parse_optional_id(make_id, "makeId"),
            make_slug=make_slug,
            make_slugs=make_slugs,
            min_price_per_day=min_price_per_day,
            max_price_per_day=max_price_per_day,
        )
        cars = info.context.car_service.list_cars(**request.model_dump())
        return [Car.from_entity(car) for car in cars]

    @strawberry.field(description="Fetch a make by exactly one of ID or name.")
    def make(
        self,
        info: Info,
        id: Optional[strawberry.ID] = None,
        name: Optional[str] = None,
    ) -> Optional[Make]:
        key = single_key("make", _id_key(id), None if name is None else ByName(name), "name")
        make = info.context.make_service.get_make(key)
        return Make.from_entity(make) if make else None

    @strawberry.field
    def makes(self, info: Info) -> List[Make]:
        return [Make.from_entity(make) for make in info.context.make_service.list_makes()]

    @strawberry.field
    def customer(self, info: Info, id: strawberry.ID) -> Optional[Customer]:
        customer = info.context.customer_service.get_customer(parse_id(id))
        return Customer.from_entity(customer) if customer else None

    @strawberry.field
    def customers(self, info: Info) -> List[Customer]:
        return [Customer.from_entity(customer) for customer in info.context.customer_service.list_customers()]

    @strawberry.field
    def rental(self, info: Info, id: strawberry.ID) -> Optional[Rental]:
        rental = info.context.rental_service.get_rental(parse_id(id))
        return Rental.from_entity(rental) if rental else None

    @strawberry.field
    def rentals(self, info: Info) -> List[Rental]:
        return [Rental.from_entity(rental) for rental in info.context.rental_service.list_rentals()]

    @strawberry.field(description="Fetch a user by exactly one of ID or username.")
    def user(
        self,
        info: Info,
        id: Optional[strawberry.ID] = None,
        username: Optional[str] = None,
    ) -> Optional[User]:
        key = single_key("user", _id_key(id), None if username is None else ByUsername(username), "username")
        user = info.context.user_service.get_user(key)
        return User.from_entity(user) if user else None

    @strawberry.field
    def users(self, info: Info) -> List[User]:
        return [User.from_entity(user) for user in info.context.user_service.list_users()]
