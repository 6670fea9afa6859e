"""
Create Customer Use Case
========================

Business use case for registering a customer.
"""
import logging
from typing import Optional

from car_rental.domain.exceptions import NotFound
from car_rental.domain.lookup import ById
from car_rental.domain.models.customer import Customer
from car_rental.domain.repositories.customer_repository import CustomerRepository
from car_rental.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """Use case for creating a customer, optionally linked to a user account."""

    def __init__(self, customer_repository: CustomerRepository, user_repository: UserRepository):
        self._customers = customer_repository
        self._users = user_repository

    def execute(self, first_name: str, last_name: str, user_id: Optional[int] = None) -> Customer:
        """
        Execute the create customer use case.

        Raises:
            NotFound: If `user_id` is given but no such user exists
        """
        if user_id is not None and not self._users.exists(user_id):
            raise NotFound("user", ById(user_id))

        customer = self._customers.create(
            Customer(first_name=first_name, last_name=last_name, user_id=user_id)
        )
        logger.info("Customer %s created", customer.id)
        return customer
