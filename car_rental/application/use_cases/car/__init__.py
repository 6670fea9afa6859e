from .create_car import CreateCarUseCase
from .edit_car import EditCarUseCase

__all__ = ["CreateCarUseCase", "EditCarUseCase"]
