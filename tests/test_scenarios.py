"""End to end operator scenarios."""

API = "/api"


def test_seat_is_freed_by_cancellation(client, add_aircraft, create_flight, book):
    add_aircraft("AC_A", 2)
    flight = create_flight("Paris", "2030-05-01T09:30:00", "AC_A")

    alice = book(flight["id"], "Alice")
    assert alice.status_code == 201
    assert book(flight["id"], "Bob").status_code == 201
    assert book(flight["id"], "Carol").status_code == 400
    assert client.delete(f"{API}/bookings/{alice.json()['id']}").status_code == 200
    assert book(flight["id"], "Carol").status_code == 201


def test_transfer_between_paris_flights_and_refused_to_rome(client, add_aircraft, create_flight, book):
    add_aircraft("AC_A", 2)
    f1 = create_flight("Paris", "2030-05-01T09:30:00", "AC_A")
    f2 = create_flight("Paris", "2030-05-02T09:30:00", "AC_A")
    f3 = create_flight("Rome", "2030-05-03T09:30:00", "AC_A")
    booking = book(f1["id"], "Alice").json()

    moved = client.post(f"{API}/bookings/{booking['id']}/transfer", json={"target_flight_id": f2["id"]})
    assert moved.status_code == 200
    assert client.get(f"{API}/flights/{f1['id']}/bookings").json() == []
    assert [b["id"] for b in client.get(f"{API}/flights/{f2['id']}/bookings").json()] == [booking["id"]]

    refused = client.post(f"{API}/bookings/{booking['id']}/transfer", json={"target_flight_id": f3["id"]})
    assert refused.status_code == 400
    assert [b["id"] for b in client.get(f"{API}/flights/{f2['id']}/bookings").json()] == [booking["id"]]


def test_same_flight_created_twice(client, add_aircraft, create_flight):
    add_aircraft("AC_A", 2)
    create_flight("Paris", "2030-05-01T09:30:00", "AC_A")

    response = client.post(f"{API}/flights", json={
        "destination": "Paris",
        "departure_date": "2030-05-01T09:30:00",
        "aircraft_id": "AC_A",
    })

    assert response.status_code == 400
