import threading
from datetime import timedelta

import pytest

from car_rental.di.container import DIContainer
from car_rental.application.services.car_service import CarService
from car_rental.application.services.customer_service import CustomerService
from car_rental.application.services.make_service import MakeService
from car_rental.application.services.rental_service import RentalService
from car_rental.core.config import Settings
from car_rental.domain.exceptions import AlreadyClosed, CapacityExceeded, NotFound
from car_rental.domain.models import Rental
from car_rental.infrastructure.db.database import Database
from car_rental.infrastructure.db.sql_rental_repository import SqlRentalRepository
from car_rental.utils.datetime_utils import now


@pytest.fixture
def q5(car_service, audi):
    return car_service.create_car("Q5", audi.id, 150, 2)


@pytest.fixture
def customers(customer_service):
    return [
        customer_service.create_customer("Dominik", "Berger"),
        customer_service.create_customer("Ravi", "Mohabir"),
        customer_service.create_customer("Max", ""),
    ]


def test_rent_until_capacity_is_exhausted(rental_service, car_service, q5, customers):
    a, b, c = customers

    first = rental_service.rent_car(q5.id, a.id)
    second = rental_service.rent_car(q5.id, b.id)

    assert first.is_open() and second.is_open()
    assert car_service.available_units(q5) == 0

    with pytest.raises(CapacityExceeded):
        rental_service.rent_car(q5.id, c.id)

    assert len(rental_service.list_rentals_for_car(q5.id)) == 2
    assert rental_service.list_rentals_for_customer(c.id) == []


def test_return_frees_a_unit(rental_service, car_service, q5, customers):
    a, b, c = customers
    first = rental_service.rent_car(q5.id, a.id)
    rental_service.rent_car(q5.id, b.id)

    returned = rental_service.return_car(first.id)

    assert returned.rental_end is not None
    assert returned.rental_end >= returned.rental_start
    assert car_service.available_units(q5) == 1
    assert rental_service.rent_car(q5.id, c.id).customer_id == c.id
    assert car_service.available_units(q5) == 0


def test_second_return_is_rejected(rental_service, q5, customers):
    rental = rental_service.rent_car(q5.id, customers[0].id)
    closed = rental_service.return_car(rental.id)

    with pytest.raises(AlreadyClosed):
        rental_service.return_car(rental.id)

    assert rental_service.get_rental(rental.id).rental_end == closed.rental_end


def test_return_of_unknown_rental(rental_service):
    with pytest.raises(NotFound, match="The rental by ID 42 does not exist."):
        rental_service.return_car(42)


def test_rent_unknown_car(rental_service, customers):
    with pytest.raises(NotFound, match="The car by ID 999 does not exist."):
        rental_service.rent_car(999, customers[0].id)


def test_rent_to_unknown_customer(rental_service, q5):
    with pytest.raises(NotFound, match="The customer by ID 999 does not exist."):
        rental_service.rent_car(q5.id, 999)

    assert rental_service.list_rentals() == []


def test_capacity_is_checked_before_the_customer(rental_service, car_service, audi):
    parked = car_service.create_car("R8", audi.id, 300, 0)

    with pytest.raises(CapacityExceeded):
        rental_service.rent_car(parked.id, 999)


def test_reducing_units_keeps_open_rentals(rental_service, car_service, q5, customers):
    a, b, c = customers
    rental_service.rent_car(q5.id, a.id)
    rental_service.rent_car(q5.id, b.id)

    shrunk = car_service.edit_car(q5.id, units=1)

    assert len(rental_service.list_rentals_for_car(q5.id)) == 2
    assert car_service.available_units(shrunk) == 0
    with pytest.raises(CapacityExceeded):
        rental_service.rent_car(q5.id, c.id)


def test_outstanding_balance_counts_open_rentals_only(rental_service, car_service, audi, customers):
    customer = customers[0]
    a4 = car_service.create_car("A4 Avant", audi.id, 70, 3)
    rs7 = car_service.create_car("RS7", audi.id, 220, 1)

    returned = rental_service.rent_car(a4.id, customer.id)
    rental_service.return_car(returned.id)
    still_open = rental_service.rent_car(rs7.id, customer.id)

    as_of = still_open.rental_start + timedelta(days=1, hours=2)

    assert rental_service.outstanding_balance(customer.id, as_of) == pytest.approx(440)
    assert rental_service.cost(still_open, as_of) == pytest.approx(440)
    assert rental_service.duration(still_open, as_of) == 2


def test_cost_follows_current_price(rental_service, car_service, q5, customers):
    rental = rental_service.rent_car(q5.id, customers[0].id)
    as_of = rental.rental_start + timedelta(hours=5)

    assert rental_service.cost(rental, as_of) == pytest.approx(150)

    car_service.edit_car(q5.id, price_per_day=200)

    assert rental_service.cost(rental, as_of) == pytest.approx(200)


def test_balance_of_customer_without_rentals(rental_service, customers):
    assert rental_service.outstanding_balance(customers[0].id) == 0


def test_repository_refuses_rental_beyond_capacity(container, car_service, audi, customers):
    repository = SqlRentalRepository(container.get(Database))
    rs7 = car_service.create_car("RS7", audi.id, 220, 1)

    assert repository.create_if_available(Rental(car_id=rs7.id, customer_id=customers[0].id, rental_start=now()))
    assert repository.create_if_available(Rental(car_id=rs7.id, customer_id=customers[1].id, rental_start=now())) is None
    assert repository.count_open_for_car(rs7.id) == 1


def test_repository_close_is_conditional(container, car_service, audi, customers):
    repository = SqlRentalRepository(container.get(Database))
    rs7 = car_service.create_car("RS7", audi.id, 220, 1)
    rental = repository.create_if_available(Rental(car_id=rs7.id, customer_id=customers[0].id, rental_start=now()))

    assert repository.close(rental.id, now()) is not None
    assert repository.close(rental.id, now()) is None
    assert repository.find_by_customer(customers[0].id, open_only=True) == []


def test_concurrent_rents_of_last_unit(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'race.db'}")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("TIMEZONE", "UTC")
    container = DIContainer(Settings())
    database = container.get(Database)
    database.create_all()

    make = container.get(MakeService).create_make("Nissan")
    car = container.get(CarService).create_car("GT-R R35", make.id, 400, 1)
    customers = [container.get(CustomerService).create_customer(f"Driver {i}", "") for i in range(8)]
    rental_service = container.get(RentalService)

    outcomes = []
    lock = threading.Lock()
    barrier = threading.Barrier(len(customers))

    def rent(customer_id):
        barrier.wait()
        try:
            rental_service.rent_car(car.id, customer_id)
            result = "rented"
        except CapacityExceeded:
            result = "full"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=rent, args=(customer.id,)) for customer in customers]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    try:
        assert outcomes.count("rented") == 1
        assert outcomes.count("full") == len(customers) - 1
        assert len(rental_service.list_rentals_for_car(car.id)) == 1
    finally:
        database.drop_all()
        database.dispose()
