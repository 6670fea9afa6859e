"""
GraphQL Scalars
===============

`Date` travels as integer milliseconds since the Unix epoch.
"""
from datetime import datetime
from typing import Any, NewType

import strawberry

from car_rental.utils.datetime_utils import from_millis, to_millis


def serialize_date(value: datetime) -> int:
    return to_millis(value)


def parse_date(value: Any) -> datetime:
    """
    Parse epoch milliseconds from a variable or literal.

    Raises:
        ValueError: If the value is not an integral number
    """
    if isinstance(value, bool):
        raise ValueError(f"Date must be milliseconds since epoch, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str) and value.lstrip("-").isdigit():
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"Date must be milliseconds since epoch, got {value!r}")
    return from_millis(value)


Date = strawberry.scalar(
    NewType("Date", datetime),
    name="Date",
    description="A date object serialized as milliseconds since the Unix epoch.",
    serialize=serialize_date,
    parse_value=parse_date,
)
