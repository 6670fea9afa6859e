from datetime import datetime, timedelta, timezone

import pytest

from car_rental.api.v1.inputs import parse_id
from car_rental.api.v1.scalars import parse_date, serialize_date
from car_rental.domain.exceptions import ValidationError
from car_rental.utils.datetime_utils import ensure_aware, from_millis, to_millis, to_utc
from car_rental.utils.slug_utils import make_slug


@pytest.mark.parametrize(
    "name, expected",
    [
        ("E250 CDI", "e250-cdi"),
        ("A5 Coupé", "a5-coupe"),
        ("GT-R R35", "gt-r-r35"),
        ("  Corvette   C8 Stingray ", "corvette-c8-stingray"),
        ("Citroën", "citroen"),
    ],
)
def test_make_slug(name, expected):
    assert make_slug(name) == expected


def test_make_slug_is_idempotent():
    slug = make_slug("Challenger Hellcat")

    assert make_slug("Challenger Hellcat") == slug
    assert make_slug(slug) == slug


def test_make_slug_rejects_names_without_letters_or_digits():
    with pytest.raises(ValidationError) as exc_info:
        make_slug("!!!", "model")

    assert exc_info.value.field == "model"


def test_millis_conversion():
    moment = datetime(2021, 1, 9, 10, 30, 15, 123000, tzinfo=timezone.utc)

    assert to_millis(moment) == 1610188215123
    assert from_millis(1610188215123) == moment
    assert to_millis(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0


def test_millis_respects_offsets():
    zurich = timezone(timedelta(hours=1))
    local = datetime(2021, 1, 9, 11, 30, tzinfo=zurich)

    assert to_millis(local) == to_millis(datetime(2021, 1, 9, 10, 30, tzinfo=timezone.utc))


def test_naive_values_are_treated_as_utc():
    naive = datetime(2021, 1, 9, 10, 30)

    assert ensure_aware(naive).tzinfo == timezone.utc
    assert to_utc(naive) == datetime(2021, 1, 9, 10, 30, tzinfo=timezone.utc)
    assert ensure_aware(None) is None


def test_date_scalar_is_symmetric_at_millisecond_precision():
    moment = datetime(2024, 2, 29, 23, 59, 59, 999000, tzinfo=timezone.utc)

    assert parse_date(serialize_date(moment)) == moment
    assert serialize_date(parse_date(1609459200000)) == 1609459200000


@pytest.mark.parametrize("value", ["yesterday", True, 1.5, None])
def test_date_scalar_rejects_non_integers(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_parse_id_accepts_64_bit_keys():
    assert parse_id("42") == 42
    assert parse_id(str(2 ** 63 - 1), "carId") == 2 ** 63 - 1


@pytest.mark.parametrize("value", [str(2 ** 63), "99999999999999999999", str(-(2 ** 63) - 1)])
def test_parse_id_rejects_keys_outside_64_bit_range(value):
    with pytest.raises(ValidationError, match="out of range for carId"):
        parse_id(value, "carId")


def test_parse_id_rejects_non_integers():
    with pytest.raises(ValidationError, match="'abc' is not a valid rentalId."):
        parse_id("abc", "rentalId")
