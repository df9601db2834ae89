"""Moving a booking to another flight with the same destination.

The booking keeps its identifier and booker name; only ``flight_id`` changes.
Checks run in a fixed order and the first failure wins:

1. the booking exists
2. the target flight exists
3. the target goes to the destination of the booking's current flight
4. the booker has no booking on the target yet
5. the target still has a free seat

Nothing is written unless all five pass. The booking row and the target
flight row are locked for the duration, so the seat count cannot change
between the check and the update.
"""
import logging

from sqlalchemy.orm import Session

from airline_ops.exceptions import CapacityError, ConflictError, NotFoundError, ValidationError
from airline_ops.models import Booking
from airline_ops.services.bookings import count_bookings, get_booking, has_booking, lock_flight
from airline_ops.services.common import commit_or_conflict

logger = logging.getLogger(__name__)

TARGET_NOT_FOUND = "Target flight not found"
DESTINATION_MISMATCH = "Destination of target flight must be the same as the original flight"
ALREADY_ON_TARGET = "This person already has a booking on the target flight"
NO_SEATS_ON_TARGET = "No available seats on the target flight"


def transfer_booking(db: Session, booking_id: str, target_flight_id: str) -> Booking:
    booking = get_booking(db, booking_id, lock=True)
    source_flight_id = booking.flight_id
    current_destination = booking.flight.destination

    target = lock_flight(db, target_flight_id)
    if not target:
        raise NotFoundError(TARGET_NOT_FOUND)

    if target.destination != current_destination:
        raise ValidationError(DESTINATION_MISMATCH)

    if has_booking(db, target.id, booking.booker_name):
        raise ConflictError(ALREADY_ON_TARGET)

    if count_bookings(db, target.id) >= target.aircraft.capacity:
        raise CapacityError(NO_SEATS_ON_TARGET)

    booking.flight = target
    commit_or_conflict(db, ALREADY_ON_TARGET)
    logger.info("Booking %s transferred from flight %s to %s", booking_id, source_flight_id, target_flight_id)
    return get_booking(db, booking_id)
