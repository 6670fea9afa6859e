"""
Make Service
============

Application service for car manufacturers.
"""
import logging
from typing import List, Optional

from car_rental.domain.lookup import MakeKey
from car_rental.domain.models.make import Make
from car_rental.domain.repositories.make_repository import MakeRepository
from car_rental.utils.slug_utils import make_slug

logger = logging.getLogger(__name__)


class MakeService:
    """Application service for make operations."""

    def __init__(self, make_repository: MakeRepository):
        self._repository = make_repository

    def create_make(self, name: str) -> Make:
        """
        Create a make with a slug derived from its name.

        Raises:
            Conflict: If the slug is already taken
        """
        make = self._repository.create(Make(name=name, slug=make_slug(name, "name")))
        logger.info("Make %s (%s) created", make.id, make.slug)
        return make

    def get_make(self, key: MakeKey) -> Optional[Make]:
        return self._repository.find(key)

    def list_makes(self) -> List[Make]:
        return self._repository.find_all()
