from .car_dto import CarCreateRequest, CarEditRequest, CarListRequest, MakeCreateRequest
from .customer_dto import CustomerCreateRequest, CustomerEditRequest, UserCreateRequest

__all__ = [
    "CarCreateRequest",
    "CarEditRequest",
    "CarListRequest",
    "MakeCreateRequest",
    "CustomerCreateRequest",
    "CustomerEditRequest",
    "UserCreateRequest",
]
