"""
Lookup Keys
===========

Tagged keys for fetching a single entity by its ID or by an alternate
unique field. Repositories dispatch on the key type, so a lookup without
a key cannot reach the store.
"""
from dataclasses import dataclass
from typing import Optional, Union

from car_rental.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ById:
    id: int
    label = "ID"

    @property
    def value(self) -> int:
        return self.id


@dataclass(frozen=True)
class BySlug:
    slug: str
    label = "slug"

    @property
    def value(self) -> str:
        return self.slug


@dataclass(frozen=True)
class ByName:
    name: str
    label = "name"

    @property
    def value(self) -> str:
        return self.name


@dataclass(frozen=True)
class ByUsername:
    username: str
    label = "username"

    @property
    def value(self) -> str:
        return self.username


CarKey = Union[ById, BySlug]
MakeKey = Union[ById, ByName]
UserKey = Union[ById, ByUsername]


def single_key(
    entity_kind: str,
    id_key: Optional[ById],
    alternate: Optional[Union[BySlug, ByName, ByUsername]],
    alternate_label: str,
):
    """
    Pick the one key given for a lookup.

    Args:
        entity_kind: Entity name used in the error message (e.g. "car")
        id_key: Key built from the `id` argument, if given
        alternate: Key built from the alternate argument, if given
        alternate_label: Name of the alternate argument (e.g. "slug")

    Returns:
        The single key that was supplied

    Raises:
        ValidationError: If neither or both keys are supplied
    """
    if id_key is not None and alternate is not None:
        raise ValidationError(
            "id",
            f"Only one of ID or {alternate_label} may be specified to query a single {entity_kind}.",
        )
    key = id_key if id_key is not None else alternate
    if key is None:
        raise ValidationError(
            "id",
            f"Either ID or {alternate_label} must be specified to query a single {entity_kind}.",
        )
    return key
