import pytest

from car_rental.domain.exceptions import Conflict, NotFound, ValidationError
from car_rental.domain.lookup import ById, ByName, BySlug, ByUsername
from car_rental.infrastructure.security.password_hasher import PasswordHasher


class TestMakes:
    def test_create_make_derives_slug(self, make_service):
        make = make_service.create_make("Lamborghini")

        assert make.id is not None
        assert make.slug == "lamborghini"
        assert make_service.get_make(ByName("Lamborghini")) == make
        assert make_service.get_make(ById(make.id)) == make

    def test_duplicate_slug_conflicts(self, make_service, audi):
        with pytest.raises(Conflict):
            make_service.create_make("AUDI")

        assert [make.name for make in make_service.list_makes()] == ["Audi"]

    def test_unknown_make(self, make_service):
        assert make_service.get_make(ByName("Trabant")) is None


class TestCars:
    def test_create_car(self, car_service, audi):
        car = car_service.create_car("A5 Coupé", audi.id, 100, 3)

        assert car.slug == "a5-coupe"
        assert car.make_id == audi.id
        assert car_service.get_car(BySlug("a5-coupe")) == car
        assert car_service.available_units(car) == 3

    def test_create_car_for_unknown_make(self, car_service):
        with pytest.raises(NotFound, match="The make by ID 77 does not exist."):
            car_service.create_car("Model S", 77, 120, 2)

    def test_duplicate_model_conflicts(self, car_service, make_service, audi):
        car_service.create_car("RS7", audi.id, 220, 1)
        other = make_service.create_make("Mercedes")

        with pytest.raises(Conflict):
            car_service.create_car("rs7", other.id, 220, 1)

    def test_rename_to_taken_slug_conflicts(self, car_service, audi):
        car_service.create_car("RS7", audi.id, 220, 1)
        a4 = car_service.create_car("A4 Avant", audi.id, 70, 6)

        with pytest.raises(Conflict, match="The slug 'rs7' is already taken."):
            car_service.edit_car(a4.id, model="RS 7")

        assert car_service.get_car(BySlug("a4-avant")) == a4

    def test_edit_car_updates_given_fields_only(self, car_service, make_service, audi):
        car = car_service.create_car("A4 Avant", audi.id, 70, 6)
        vw = make_service.create_make("Volkswagen")

        edited = car_service.edit_car(car.id, model="Passat Variant", make_id=vw.id)

        assert edited.slug == "passat-variant"
        assert edited.make_id == vw.id
        assert edited.price_per_day == 70
        assert edited.units == 6
        assert car_service.get_car(BySlug("a4-avant")) is None

    def test_edit_unknown_car(self, car_service):
        with pytest.raises(NotFound):
            car_service.edit_car(5, price_per_day=10)

    def test_edit_car_to_unknown_make(self, car_service, audi):
        car = car_service.create_car("A4 Avant", audi.id, 70, 6)

        with pytest.raises(NotFound):
            car_service.edit_car(car.id, make_id=1234)

    def test_rejects_model_without_slug(self, car_service, audi):
        with pytest.raises(ValidationError):
            car_service.create_car("???", audi.id, 70, 1)


class TestCarListing:
    @pytest.fixture
    def catalog(self, make_service, car_service, audi):
        toyota = make_service.create_make("Toyota")
        honda = make_service.create_make("Honda")
        return {
            "a4": car_service.create_car("A4 Avant", audi.id, 70, 6),
            "rs7": car_service.create_car("RS7", audi.id, 220, 1),
            "supra": car_service.create_car("Supra", toyota.id, 400, 1),
            "civic": car_service.create_car("Civic", honda.id, 60, 8),
        }

    @staticmethod
    def slugs(cars):
        return sorted(car.slug for car in cars)

    def test_no_filters(self, car_service, catalog):
        assert len(car_service.list_cars()) == 4

    def test_by_make_id(self, car_service, catalog, audi):
        assert self.slugs(car_service.list_cars(make_id=audi.id)) == ["a4-avant", "rs7"]

    def test_by_make_slugs(self, car_service, catalog):
        cars = car_service.list_cars(make_slugs=["toyota", "honda", "unknown"])

        assert self.slugs(cars) == ["civic", "supra"]

    def test_unknown_make_slug(self, car_service, catalog):
        with pytest.raises(NotFound, match="slug trabant"):
            car_service.list_cars(make_slug="trabant")

    def test_price_bounds(self, car_service, catalog):
        assert self.slugs(car_service.list_cars(min_price_per_day=220)) == ["rs7", "supra"]
        assert self.slugs(car_service.list_cars(max_price_per_day=220)) == ["a4-avant", "civic"]

    def test_filters_combine(self, car_service, catalog, audi):
        cars = car_service.list_cars(make_slug="audi", make_slugs=["audi", "toyota"], max_price_per_day=100)

        assert self.slugs(cars) == ["a4-avant"]

    def test_disjoint_make_filters_match_nothing(self, car_service, catalog, audi):
        assert car_service.list_cars(make_id=audi.id, make_slug="honda") == []

    def test_list_by_make(self, car_service, catalog, audi):
        assert self.slugs(car_service.list_cars_by_make(audi.id)) == ["a4-avant", "rs7"]


class TestCustomersAndUsers:
    def test_create_customer_without_account(self, customer_service):
        customer = customer_service.create_customer("Max", "")

        assert customer.user_id is None
        assert customer_service.get_customer(customer.id) == customer

    def test_create_customer_for_unknown_user(self, customer_service):
        with pytest.raises(NotFound, match="The user by ID 3 does not exist."):
            customer_service.create_customer("Dominik", "Berger", user_id=3)

        assert customer_service.list_customers() == []

    def test_link_and_unlink_account(self, customer_service, user_service):
        user = user_service.create_user("Doemuu", "test123")
        customer = customer_service.create_customer("Dominik", "Berger")

        linked = customer_service.edit_customer(customer.id, user_id=user.id, set_user_id=True)
        assert linked.user_id == user.id
        assert customer_service.get_customer_for_user(user.id) == linked

        renamed = customer_service.edit_customer(customer.id, first_name="Dom")
        assert renamed.user_id == user.id
        assert renamed.last_name == "Berger"

        unlinked = customer_service.edit_customer(customer.id, user_id=None, set_user_id=True)
        assert unlinked.user_id is None
        assert customer_service.get_customer_for_user(user.id) is None

    def test_edit_unknown_customer(self, customer_service):
        with pytest.raises(NotFound, match="customer"):
            customer_service.edit_customer(9, first_name="Nobody")

    def test_password_is_hashed(self, container, user_service):
        hasher = container.get(PasswordHasher)
        user = user_service.create_user("Dan6erbond", "test123")

        assert user.password != "test123"
        assert hasher.verify("test123", user.password)
        assert not hasher.verify("test124", user.password)
        assert "test123" not in repr(user)

    def test_duplicate_username_conflicts(self, user_service):
        user_service.create_user("Doemuu", "test123")

        with pytest.raises(Conflict):
            user_service.create_user("Doemuu", "other")

    def test_get_user_by_username(self, user_service):
        user = user_service.create_user("Doemuu", "test123")

        assert user_service.get_user(ByUsername("Doemuu")) == user
        assert user_service.get_user(ById(user.id + 1)) is None
