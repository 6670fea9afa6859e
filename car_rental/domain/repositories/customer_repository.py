"""
Customer Repository Interface
=============================

Abstract interface for customer data access.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from car_rental.domain.models.customer import Customer


class CustomerRepository(ABC):
    """Abstract repository for customer persistence operations."""

    @abstractmethod
    def create(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    def update(self, customer: Customer) -> Customer:
        """
        Update an existing customer.

        Raises:
            NotFound: If the customer no longer exists
        """
        pass

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    def find_all(self) -> List[Customer]:
        pass
