import os

# must be set before airline_ops.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_AIRCRAFT"] = "true"

import pytest
from fastapi.testclient import TestClient

from airline_ops.database import Base, SessionLocal, engine
from airline_ops.main import app
from airline_ops.models import Aircraft

API = "/api"


@pytest.fixture
def client():
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def add_aircraft(db):
    def _add(aircraft_id, capacity, name=None):
        db.add(Aircraft(id=aircraft_id, name=name or f"Test {aircraft_id}", capacity=capacity))
        db.commit()
        return aircraft_id

    return _add


@pytest.fixture
def two_seater(add_aircraft):
    return add_aircraft("AC_TEST_2", 2, name="Two Seater")


@pytest.fixture
def create_flight(client):
    def _create(destination, departure_date, aircraft_id):
        response = client.post(f"{API}/flights", json={
            "destination": destination,
            "departure_date": departure_date,
            "aircraft_id": aircraft_id,
        })
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def book(client):
    def _book(flight_id, booker_name):
        return client.post(f"{API}/bookings", json={"flight_id": flight_id, "booker_name": booker_name})

    return _book
