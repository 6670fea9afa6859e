"""
GraphQL Inputs
==============

Input objects for mutations and helpers turning raw GraphQL arguments
into validated request DTOs.
"""
from typing import Any, Optional, Type, TypeVar

import strawberry
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from car_rental.domain.exceptions import ValidationError

RequestType = TypeVar("RequestType", bound=BaseModel)

# Primary keys are signed 64-bit integers in every supported store
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def parse_id(value: Any, field: str = "id") -> int:
    """
    Convert a GraphQL ID to a database ID.

    Raises:
        ValidationError: If the value is not an integer in the key range
    """
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(field, f"'{value}' is not a valid {field}.") from None
    if not MIN_ID <= parsed <= MAX_ID:
        raise ValidationError(field, f"'{value}' is out of range for {field}.")
    return parsed


def parse_optional_id(value: Optional[Any], field: str) -> Optional[int]:
    return None if value is None else parse_id(value, field)


def validate_request(request_type: Type[RequestType], **data: Any) -> RequestType:
    """
    Build a request DTO, reporting the first pydantic error as a ValidationError.
    """
    try:
        return request_type(**data)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "input"
        raise ValidationError(field, f"Invalid {field}: {error['msg']}") from None


@strawberry.input
class CreateMakeInput:
    name: str


@strawberry.input
class CreateCarInput:
    model: str
    make_id: strawberry.ID
    price_per_day: float
    units: int


@strawberry.input
class EditCarInput:
    id: strawberry.ID
    model: Optional[str] = None
    make_id: Optional[strawberry.ID] = None
    price_per_day: Optional[float] = None
    units: Optional[int] = None


@strawberry.input
class CreateCustomerInput:
    first_name: str
    last_name: str
    user_id: Optional[strawberry.ID] = None


@strawberry.input
class EditCustomerInput:
    """Omitting `userId` keeps the link; an explicit null removes it."""
    id: strawberry.ID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    user_id: Optional[strawberry.ID] = strawberry.UNSET


@strawberry.input
class CreateUserInput:
    username: str
    password: str


@strawberry.input
class RentCarInput:
    car_id: strawberry.ID
    customer_id: strawberry.ID


@strawberry.input
class ReturnCarInput:
    rental_id: strawberry.ID
