import pytest
from fastapi.testclient import TestClient

from car_rental.application.services.car_service import CarService
from car_rental.application.services.customer_service import CustomerService
from car_rental.application.services.make_service import MakeService
from car_rental.application.services.rental_service import RentalService
from car_rental.application.services.user_service import UserService
from car_rental.core.config import Settings
from car_rental.di.container import DIContainer
from car_rental.infrastructure.db.database import Database
from car_rental.main import create_application


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("DATABASE_AUTO_CREATE", "true")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("GRAPHQL_IDE", "false")
    monkeypatch.setenv("TIMEZONE", "UTC")
    return Settings()


@pytest.fixture
def container(settings):
    container = DIContainer(settings)
    database = container.get(Database)
    database.create_all()
    yield container
    database.drop_all()
    database.dispose()


@pytest.fixture
def make_service(container) -> MakeService:
    return container.get(MakeService)


@pytest.fixture
def car_service(container) -> CarService:
    return container.get(CarService)


@pytest.fixture
def customer_service(container) -> CustomerService:
    return container.get(CustomerService)


@pytest.fixture
def user_service(container) -> UserService:
    return container.get(UserService)


@pytest.fixture
def rental_service(container) -> RentalService:
    return container.get(RentalService)


@pytest.fixture
def audi(make_service):
    return make_service.create_make("Audi")


@pytest.fixture
def client(container):
    return TestClient(create_application(container))


@pytest.fixture
def graphql(client):
    """Post a GraphQL document and return the decoded response body."""

    def execute(query, variables=None):
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200, response.text
        return response.json()

    return execute
