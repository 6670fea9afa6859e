"""
Edit Customer Use Case
======================

Business use case for changing a customer's data.
"""
import logging
from typing import Optional

from car_rental.domain.exceptions import NotFound
from car_rental.domain.lookup import ById
from car_rental.domain.models.customer import Customer
from car_rental.domain.repositories.customer_repository import CustomerRepository
from car_rental.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class EditCustomerUseCase:
    """Use case for partially updating a customer."""

    def __init__(self, customer_repository: CustomerRepository, user_repository: UserRepository):
        self._customers = customer_repository
        self._users = user_repository

    def execute(
        self,
        customer_id: int,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        user_id: Optional[int] = None,
        set_user_id: bool = False,
    ) -> Customer:
        """
        Execute the edit customer use case.

        Args:
            customer_id: Customer to update
            first_name: New first name, if changing
            last_name: New last name, if changing
            user_id: Account to link (None unlinks when `set_user_id` is true)
            set_user_id: Whether `user_id` should be applied at all

        Raises:
            NotFound: If the customer or the new user does not exist
        """
        customer = self._customers.find_by_id(customer_id)
        if customer is None:
            raise NotFound("customer", ById(customer_id))

        if set_user_id:
            if user_id is not None and not self._users.exists(user_id):
                raise NotFound("user", ById(user_id))
            customer.user_id = user_id
        if first_name is not None:
            customer.first_name = first_name
        if last_name is not None:
            customer.last_name = last_name

        updated = self._customers.update(customer)
        logger.info("Customer %s updated", updated.id)
        return updated
