"""
Demo data seeding script
------------------------

Purpose:
- Fill an empty database with a few makes, cars, user accounts, customers
  and open rentals so the GraphQL API has something to show.

How to use:
1) Optionally set DATABASE_URL (defaults to ./car_rental.db)
2) Run:
   python -m car_rental.scripts.seed
3) Start the server and open /graphql
"""
import logging
from typing import Dict, List, Tuple

from car_rental.application.services.car_service import CarService
from car_rental.application.services.customer_service import CustomerService
from car_rental.application.services.make_service import MakeService
from car_rental.application.services.rental_service import RentalService
from car_rental.application.services.user_service import UserService
from car_rental.core.config import Settings
from car_rental.core.logging_config import configure_logging
from car_rental.di.container import DIContainer, get_container
from car_rental.infrastructure.db.database import Database

logger = logging.getLogger(__name__)

MAKES: List[str] = ["Mercedes", "Audi", "Toyota", "Honda", "Nissan", "Ford", "Lamborghini"]

# (make, model, price per day, units)
CARS: List[Tuple[str, str, float, int]] = [
    ("Mercedes", "E250 CDI", 100, 4),
    ("Mercedes", "G63 AMG", 150, 2),
    ("Audi", "A4 Avant", 70, 6),
    ("Audi", "A5 Coupé", 100, 3),
    ("Audi", "RS7", 220, 1),
    ("Toyota", "Supra", 400, 1),
    ("Toyota", "Landcruiser", 150, 5),
    ("Honda", "Civic", 60, 8),
    ("Nissan", "GT-R R35", 400, 1),
    ("Ford", "Mustang", 170, 3),
    ("Lamborghini", "Huràcan", 370, 1),
]

# (username, password, first name, last name)
ACCOUNTS: List[Tuple[str, str, str, str]] = [
    ("Dan6erbond", "test123", "RaviAnand", "Mohabir"),
    ("Doemuu", "test123", "Dominik", "Berger"),
    ("Idkwhatnickshouldiuse", "test123", "Max", ""),
]

# (customer index, car model)
RENTALS: List[Tuple[int, str]] = [(0, "Mustang"), (2, "Civic"), (1, "A5 Coupé")]


def seed(container: DIContainer) -> bool:
    """
    Insert the demo data set.

    Args:
        container: DI container with registered services

    Returns:
        True if data was inserted, False if the database already had makes
    """
    make_service = container.get(MakeService)
    if make_service.list_makes():
        logger.info("Database already contains makes, skipping seed")
        return False

    car_service = container.get(CarService)
    user_service = container.get(UserService)
    customer_service = container.get(CustomerService)
    rental_service = container.get(RentalService)

    make_ids: Dict[str, int] = {name: make_service.create_make(name).id for name in MAKES}

    car_ids: Dict[str, int] = {}
    for make_name, model, price_per_day, units in CARS:
        car = car_service.create_car(model, make_ids[make_name], price_per_day, units)
        car_ids[model] = car.id

    customer_ids: List[int] = []
    for username, password, first_name, last_name in ACCOUNTS:
        user = user_service.create_user(username, password)
        customer_ids.append(customer_service.create_customer(first_name, last_name, user_id=user.id).id)

    for customer_index, model in RENTALS:
        rental_service.rent_car(car_ids[model], customer_ids[customer_index])

    logger.info(
        "Seeded %s makes, %s cars, %s customers, %s rentals",
        len(MAKES), len(CARS), len(ACCOUNTS), len(RENTALS),
    )
    return True


def main() -> None:
    container = get_container()
    configure_logging(container.get(Settings).log_level)
    container.get(Database).create_all()
    seed(container)


if __name__ == "__main__":
    main()
