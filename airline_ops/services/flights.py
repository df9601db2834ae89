import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from airline_ops.exceptions import CapacityError, ConflictError, NotFoundError, ValidationError
from airline_ops.ids import FLIGHT_PREFIX, generate_id
from airline_ops.models import Aircraft, Booking, Flight
from airline_ops.schemas.flight import FlightBaseSchema
from airline_ops.services.common import commit_or_conflict

logger = logging.getLogger(__name__)

FLIGHT_NOT_FOUND = "Flight not found"
DUPLICATE_FLIGHT = "Flight with the same destination and departure date already exists"
AIRCRAFT_NOT_FOUND = "Aircraft not found"
AIRCRAFT_TOO_SMALL = "Aircraft capacity is below the number of existing bookings"


def list_flights(db: Session) -> List[Flight]:
    return (
        db.query(Flight)
        .options(joinedload(Flight.aircraft))
        .order_by(Flight.departure_date, Flight.id)
        .all()
    )


def get_flight(db: Session, flight_id: str) -> Flight:
    flight = db.query(Flight).options(joinedload(Flight.aircraft)).filter(Flight.id == flight_id).first()
    if not flight:
        raise NotFoundError(FLIGHT_NOT_FOUND)
    return flight


def find_duplicate_flight(db: Session, destination: str, departure_date: datetime,
                          exclude_id: Optional[str] = None) -> Optional[str]:
    query = db.query(Flight.id).filter(Flight.destination == destination, Flight.departure_date == departure_date)
    if exclude_id is not None:
        query = query.filter(Flight.id != exclude_id)
    row = query.first()
    return row.id if row else None


def _raise_if_aircraft_missing(db: Session, aircraft_id: str):
    if db.get(Aircraft, aircraft_id) is None:
        raise ValidationError(AIRCRAFT_NOT_FOUND)


def create_flight(db: Session, data: FlightBaseSchema) -> Flight:
    if find_duplicate_flight(db, data.destination, data.departure_date):
        raise ConflictError(DUPLICATE_FLIGHT)

    flight_id = generate_id(FLIGHT_PREFIX)
    new_flight = Flight(
        id=flight_id,
        destination=data.destination,
        departure_date=data.departure_date,
        aircraft_id=data.aircraft_id,
    )
    db.add(new_flight)
    commit_or_conflict(db, DUPLICATE_FLIGHT, lambda: _raise_if_aircraft_missing(db, data.aircraft_id))
    logger.info("Flight %s created: %s at %s", flight_id, data.destination, data.departure_date)
    return get_flight(db, flight_id)


def update_flight(db: Session, flight_id: str, data: FlightBaseSchema) -> Flight:
    flight_record = db.query(Flight).filter(Flight.id == flight_id).with_for_update().first()
    if not flight_record:
        raise NotFoundError(FLIGHT_NOT_FOUND)

    if find_duplicate_flight(db, data.destination, data.departure_date, exclude_id=flight_id):
        raise ConflictError(DUPLICATE_FLIGHT)

    # create leaves the aircraft to the foreign key; a swap has to load it anyway
    # to compare its seats with the bookings already on the flight
    if data.aircraft_id != flight_record.aircraft_id:
        aircraft = db.get(Aircraft, data.aircraft_id)
        if aircraft is None:
            raise ValidationError(AIRCRAFT_NOT_FOUND)
        booked = db.query(Booking).filter(Booking.flight_id == flight_id).count()
        if booked > aircraft.capacity:
            raise CapacityError(AIRCRAFT_TOO_SMALL)

    for key, value in data.model_dump().items():
        setattr(flight_record, key, value)
    commit_or_conflict(db, DUPLICATE_FLIGHT, lambda: _raise_if_aircraft_missing(db, data.aircraft_id))
    logger.info("Flight %s updated", flight_id)
    return get_flight(db, flight_id)


def delete_flight(db: Session, flight_id: str) -> None:
    flight_record = db.query(Flight).filter(Flight.id == flight_id).first()
    if not flight_record:
        raise NotFoundError(FLIGHT_NOT_FOUND)

    # dependents go first and in the same transaction, whether or not the backend cascades
    removed = (
        db.query(Booking)
        .filter(Booking.flight_id == flight_id)
        .delete(synchronize_session=False)
    )
    db.delete(flight_record)
    db.commit()
    logger.info("Flight %s deleted together with %d booking(s)", flight_id, removed)
