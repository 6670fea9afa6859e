from datetime import datetime, timedelta, timezone

import pytest

from car_rental.domain.billing import available_units, duration_days, outstanding_balance, rental_cost
from car_rental.domain.exceptions import AlreadyClosed
from car_rental.domain.models import Car, Rental

START = datetime(2021, 1, 9, 10, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "units, open_rentals, expected",
    [(2, 0, 2), (2, 1, 1), (2, 2, 0), (2, 5, 0), (0, 0, 0)],
)
def test_available_units_is_floored_at_zero(units, open_rentals, expected):
    assert available_units(units, open_rentals) == expected


def test_zero_length_rental_has_no_duration_and_no_cost():
    rental = Rental(id=1, car_id=1, customer_id=1, rental_start=START, rental_end=START)

    assert rental.duration() == 0
    assert rental.cost(100) == 0


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (timedelta(milliseconds=1), 1),
        (timedelta(hours=23, minutes=59), 1),
        (timedelta(days=1), 1),
        (timedelta(days=1, seconds=1), 2),
        (timedelta(days=6, hours=12), 7),
    ],
)
def test_duration_counts_started_days(elapsed, expected):
    assert duration_days(START, START + elapsed, as_of=START) == expected


def test_open_rental_is_measured_up_to_reference_time():
    rental = Rental(id=1, car_id=1, customer_id=1, rental_start=START)

    assert rental.duration(as_of=START + timedelta(days=2, hours=1)) == 3


def test_closed_rental_ignores_reference_time():
    rental = Rental(id=1, car_id=1, customer_id=1, rental_start=START, rental_end=START + timedelta(hours=5))

    assert rental.duration(as_of=START + timedelta(days=30)) == 1


def test_duration_never_negative():
    assert duration_days(START, None, as_of=START - timedelta(hours=3)) == 0


def test_cost_is_price_times_duration():
    rental = Rental(id=1, car_id=1, customer_id=1, rental_start=START, rental_end=START + timedelta(days=3))

    assert rental.cost(80.5) == pytest.approx(80.5 * rental.duration())
    assert rental_cost(80.5, 3) == pytest.approx(241.5)


def test_outstanding_balance_sums_charges():
    assert outstanding_balance([(100, 2), (50.5, 1)]) == pytest.approx(250.5)
    assert outstanding_balance([]) == 0


def test_closing_twice_is_rejected():
    rental = Rental(id=7, car_id=1, customer_id=1, rental_start=START)
    rental.close(START + timedelta(hours=1))

    with pytest.raises(AlreadyClosed) as exc_info:
        rental.close(START + timedelta(hours=2))

    assert exc_info.value.rental_id == 7
    assert rental.rental_end == START + timedelta(hours=1)


def test_car_capacity():
    car = Car(id=1, make_id=1, model="Q5", slug="q5", price_per_day=150, units=2)

    assert car.has_capacity(1)
    assert not car.has_capacity(2)
    assert car.available_units(3) == 0
