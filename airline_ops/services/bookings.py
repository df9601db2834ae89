import logging
from typing import List, Optional

from sqlalchemy.orm import Session, contains_eager

from airline_ops.exceptions import CapacityError, ConflictError, NotFoundError
from airline_ops.ids import BOOKING_PREFIX, generate_id
from airline_ops.models import Booking, Flight
from airline_ops.schemas.booking import BookingCreateSchema, BookingUpdateSchema
from airline_ops.services.common import commit_or_conflict
from airline_ops.services.flights import FLIGHT_NOT_FOUND

logger = logging.getLogger(__name__)

BOOKING_NOT_FOUND = "Booking not found"
ALREADY_BOOKED = "This person already has a booking on this flight"
NO_SEATS = "No available seats on this flight"


def list_flight_bookings(db: Session, flight_id: str) -> List[Booking]:
    return db.query(Booking).filter(Booking.flight_id == flight_id).order_by(Booking.booker_name, Booking.id).all()


def list_bookings(db: Session) -> List[Booking]:
    return (
        db.query(Booking)
        .join(Booking.flight)
        .options(contains_eager(Booking.flight))
        .order_by(Flight.departure_date, Booking.booker_name, Booking.id)
        .all()
    )


def get_booking(db: Session, booking_id: str, lock: bool = False) -> Booking:
    query = db.query(Booking).filter(Booking.id == booking_id)
    if lock:
        query = query.with_for_update()
    booking = query.first()
    if not booking:
        raise NotFoundError(BOOKING_NOT_FOUND)
    return booking


def lock_flight(db: Session, flight_id: str) -> Optional[Flight]:
    """Load a flight row with ``SELECT ... FOR UPDATE``.

    Every writer that changes the bookings of a flight takes this lock first,
    so a seat count read afterwards stays valid until the transaction ends.
    """
    return db.query(Flight).filter(Flight.id == flight_id).with_for_update().first()


def count_bookings(db: Session, flight_id: str) -> int:
    return db.query(Booking).filter(Booking.flight_id == flight_id).count()


def has_booking(db: Session, flight_id: str, booker_name: str, exclude_id: Optional[str] = None) -> bool:
    query = db.query(Booking.id).filter(Booking.flight_id == flight_id, Booking.booker_name == booker_name)
    if exclude_id is not None:
        query = query.filter(Booking.id != exclude_id)
    return query.first() is not None


def create_booking(db: Session, data: BookingCreateSchema) -> Booking:
    flight = lock_flight(db, data.flight_id)
    if not flight:
        raise NotFoundError(FLIGHT_NOT_FOUND)

    if has_booking(db, flight.id, data.booker_name):
        raise ConflictError(ALREADY_BOOKED)

    if count_bookings(db, flight.id) >= flight.aircraft.capacity:
        raise CapacityError(NO_SEATS)

    booking_id = generate_id(BOOKING_PREFIX)
    db.add(Booking(id=booking_id, flight_id=flight.id, booker_name=data.booker_name))
    commit_or_conflict(db, ALREADY_BOOKED)
    logger.info("Booking %s created for %r on flight %s", booking_id, data.booker_name, data.flight_id)
    return get_booking(db, booking_id)


def update_booking(db: Session, booking_id: str, data: BookingUpdateSchema) -> Booking:
    """Rename the booker. The booking stays on the flight it is stored on."""
    booking = get_booking(db, booking_id, lock=True)

    check_flight_id = data.flight_id or booking.flight_id
    if has_booking(db, check_flight_id, data.booker_name, exclude_id=booking_id):
        raise ConflictError(ALREADY_BOOKED)

    booking.booker_name = data.booker_name
    commit_or_conflict(db, ALREADY_BOOKED)
    logger.info("Booking %s renamed to %r", booking_id, data.booker_name)
    return get_booking(db, booking_id)


def delete_booking(db: Session, booking_id: str) -> None:
    removed = db.query(Booking).filter(Booking.id == booking_id).delete(synchronize_session=False)
    if not removed:
        raise NotFoundError(BOOKING_NOT_FOUND)
    db.commit()
    logger.info("Booking %s deleted", booking_id)
