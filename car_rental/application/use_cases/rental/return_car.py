"""
Return Car Use Case
===================

Business use case for closing an open rental.
"""
import logging

from car_rental.domain.exceptions import AlreadyClosed, NotFound
from car_rental.domain.lookup import ById
from car_rental.domain.models.rental import Rental
from car_rental.domain.repositories.rental_repository import RentalRepository
from car_rental.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class ReturnCarUseCase:
    """
    Use case for closing a rental.

    Returning is not idempotent: a second return of the same rental is
    reported as AlreadyClosed.
    """

    def __init__(self, rental_repository: RentalRepository):
        self._rentals = rental_repository

    def execute(self, rental_id: int) -> Rental:
        """
        Execute the return car use case.

        Args:
            rental_id: Rental to close

        Returns:
            The closed rental

        Raises:
            NotFound: If the rental does not exist
            AlreadyClosed: If the rental was already returned
        """
        rental = self._rentals.find_by_id(rental_id)
        if rental is None:
            raise NotFound("rental", ById(rental_id))

        # Validates the transition before touching the store
        rental.close(now())

        closed = self._rentals.close(rental.id, rental.rental_end)
        if closed is None:
            # Another request closed it between the read and the update
            raise AlreadyClosed(rental.id)

        logger.info("Rental %s closed after %s day(s)", closed.id, closed.duration())
        return closed
