from .rent_car import RentCarUseCase
from .return_car import ReturnCarUseCase

__all__ = ["RentCarUseCase", "ReturnCarUseCase"]
