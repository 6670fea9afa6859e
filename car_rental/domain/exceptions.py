"""
Domain Exceptions
=================

Error taxonomy shared by every layer.

DomainError subclasses describe outcomes a caller is expected to handle
(they are returned in mutation payloads). ValidationError describes a
malformed request and is raised all the way to the transport.
"""
from typing import Any, Optional


class CarRentalError(Exception):
    """Base class for all application errors."""


class DomainError(CarRentalError):
    """An operation was well-formed but the current state rejects it."""


class NotFound(DomainError):
    """A referenced entity does not exist."""

    def __init__(self, entity_kind: str, key: Any):
        self.entity_kind = entity_kind
        self.key = key
        label, value = _describe_key(key)
        super().__init__(f"The {entity_kind} by {label} {value} does not exist.")


class CapacityExceeded(DomainError):
    """Every unit of the car is currently rented out."""

    def __init__(self, car_id: int):
        self.car_id = car_id
        super().__init__(f"Every unit of the car by ID {car_id} is currently rented out.")


class AlreadyClosed(DomainError):
    """The rental was already returned."""

    def __init__(self, rental_id: int):
        self.rental_id = rental_id
        super().__init__(f"The rental by ID {rental_id} has already been returned.")


class Conflict(DomainError):
    """A unique field collides with an existing record."""

    def __init__(self, field: str, value: Optional[Any] = None):
        self.field = field
        self.value = value
        if value is None:
            super().__init__(f"The {field} is already taken.")
        else:
            super().__init__(f"The {field} '{value}' is already taken.")


class ValidationError(CarRentalError):
    """The request itself is malformed (missing, ambiguous or out-of-range arguments)."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(reason)


def _describe_key(key: Any) -> tuple:
    # Lookup keys expose label/value; bare values are treated as IDs
    label = getattr(key, "label", None)
    if label is not None:
        return label, key.value
    return "ID", key
