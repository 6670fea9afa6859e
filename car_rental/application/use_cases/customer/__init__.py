from .create_customer import CreateCustomerUseCase
from .edit_customer import EditCustomerUseCase

__all__ = ["CreateCustomerUseCase", "EditCustomerUseCase"]
