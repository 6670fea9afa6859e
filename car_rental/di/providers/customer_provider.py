from typing import TYPE_CHECKING
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.customer_service import CustomerService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CustomerProvider:
    """Customer service provider - registers customer-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            CustomerService,
            CustomerService(
                customer_repository=container.get(CustomerRepository),
                user_repository=container.get(UserRepository),
            )
        )
