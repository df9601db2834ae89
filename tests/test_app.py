import re

from airline_ops.config import Settings
from airline_ops.ids import generate_id
from airline_ops.main import describe_validation_errors
from airline_ops.schemas.booking import BookingCreateSchema
from airline_ops.schemas.flight import FlightBaseSchema
from airline_ops.seed import DEFAULT_FLEET, seed_aircraft

API = "/api"


class TestAircraft:

    def test_default_fleet_seeded(self, client):
        aircraft = client.get(f"{API}/aircraft").json()

        assert aircraft == sorted(DEFAULT_FLEET, key=lambda entry: entry["id"])

    def test_seeding_skips_populated_table(self, db):
        assert seed_aircraft(db) == 0


class TestErrors:

    def test_unknown_route(self, client):
        response = client.get(f"{API}/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_describe_validation_errors(self):
        errors = [
            {"loc": ("body", "destination"), "type": "string_too_short", "input": ""},
            {"loc": ("body", "departure_date"), "type": "datetime_from_date_parsing", "input": "soon"},
        ]

        assert describe_validation_errors(errors) == "Missing required field: destination"
        assert describe_validation_errors(errors[1:]) == "Invalid value for field: departure_date"


class TestIds:

    def test_format(self):
        assert re.fullmatch(r"FL_\d{13}_[0-9a-z]{9}", generate_id("FL"))

    def test_unique(self):
        assert len({generate_id("BK") for _ in range(1000)}) == 1000


class TestSettings:

    def test_postgres_url_built_from_parts(self):
        settings = Settings(
            DATABASE_URL=None,
            POSTGRES_USER="ops",
            POSTGRES_PASSWORD="secret",
            POSTGRES_HOSTNAME="db",
            DATABASE_PORT=5433,
            POSTGRES_DB="fleet",
        )

        assert settings.database_url == "postgresql://ops:secret@db:5433/fleet"

    def test_explicit_url_wins(self):
        assert Settings(DATABASE_URL="sqlite:///ops.db").database_url == "sqlite:///ops.db"


class TestSchemas:

    def test_numeric_identifiers_accepted_as_strings(self):
        booking = BookingCreateSchema(flight_id=7, booker_name="Alice")
        flight = FlightBaseSchema(destination="Paris", departure_date="2030-05-01T09:30:00", aircraft_id=3)

        assert booking.flight_id == "7"
        assert flight.aircraft_id == "3"
