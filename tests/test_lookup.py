import pytest

from car_rental.domain.exceptions import NotFound, ValidationError
from car_rental.domain.lookup import ById, BySlug, ByUsername, single_key


def test_single_key_returns_the_given_key():
    assert single_key("car", ById(3), None, "slug") == ById(3)
    assert single_key("car", None, BySlug("rs7"), "slug") == BySlug("rs7")


def test_single_key_requires_a_key():
    with pytest.raises(ValidationError, match="Either ID or slug must be specified to query a single car."):
        single_key("car", None, None, "slug")


def test_single_key_rejects_two_keys():
    with pytest.raises(ValidationError, match="Only one of ID or username"):
        single_key("user", ById(1), ByUsername("Doemuu"), "username")


def test_not_found_message_names_the_key():
    assert str(NotFound("make", ById(4))) == "The make by ID 4 does not exist."
    assert str(NotFound("make", BySlug("lada"))) == "The make by slug lada does not exist."
    assert str(NotFound("user", 9)) == "The user by ID 9 does not exist."
