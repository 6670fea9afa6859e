"""
Customer Service
================

Application service for the customer directory.
"""
from typing import List, Optional

from car_rental.application.use_cases.customer.create_customer import CreateCustomerUseCase
from car_rental.application.use_cases.customer.edit_customer import EditCustomerUseCase
from car_rental.domain.models.customer import Customer
from car_rental.domain.repositories.customer_repository import CustomerRepository
from car_rental.domain.repositories.user_repository import UserRepository


class CustomerService:
    """Application service for customer operations."""

    def __init__(self, customer_repository: CustomerRepository, user_repository: UserRepository):
        self._repository = customer_repository
        self._create_use_case = CreateCustomerUseCase(customer_repository, user_repository)
        self._edit_use_case = EditCustomerUseCase(customer_repository, user_repository)

    def create_customer(self, first_name: str, last_name: str, user_id: Optional[int] = None) -> Customer:
        return self._create_use_case.execute(first_name, last_name, user_id=user_id)

    def edit_customer(
        self,
        customer_id: int,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        user_id: Optional[int] = None,
        set_user_id: bool = False,
    ) -> Customer:
        return self._edit_use_case.execute(
            customer_id,
            first_name=first_name,
            last_name=last_name,
            user_id=user_id,
            set_user_id=set_user_id,
        )

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self._repository.find_by_id(customer_id)

    def get_customer_for_user(self, user_id: int) -> Optional[Customer]:
        return self._repository.find_by_user_id(user_id)

    def list_customers(self) -> List[Customer]:
        return self._repository.find_all()
