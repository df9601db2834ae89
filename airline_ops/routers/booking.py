from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from airline_ops.database import get_db
from airline_ops.schemas.booking import (BookingCreateSchema, BookingSchema, BookingTransferSchema,
                                         BookingUpdateSchema, BookingWithFlightSchema)
from airline_ops.schemas.common import MessageResponse
from airline_ops.services import bookings as booking_service
from airline_ops.services.transfer import transfer_booking

booking_router = APIRouter()


# [...] get all booking records with their flight
@booking_router.get("", response_model=List[BookingWithFlightSchema])
def get_bookings(db: Session = Depends(get_db)):
    return booking_service.list_bookings(db)


# [...] add a new booking record
@booking_router.post("", response_model=BookingSchema, status_code=status.HTTP_201_CREATED)
def add_booking(booking: BookingCreateSchema, db: Session = Depends(get_db)):
    return booking_service.create_booking(db, booking)


# [...] rename the booker of a booking
@booking_router.put("/{booking_id}", response_model=BookingSchema)
def update_booking(booking_id: str, booking: BookingUpdateSchema, db: Session = Depends(get_db)):
    return booking_service.update_booking(db, booking_id, booking)


# [...] delete a booking record
@booking_router.delete("/{booking_id}", response_model=MessageResponse)
def delete_booking(booking_id: str, db: Session = Depends(get_db)):
    booking_service.delete_booking(db, booking_id)
    return {"message": "Booking deleted successfully"}


# [...] move a booking to another flight
@booking_router.post("/{booking_id}/transfer", response_model=BookingSchema)
def transfer(booking_id: str, request: BookingTransferSchema, db: Session = Depends(get_db)):
    return transfer_booking(db, booking_id, request.target_flight_id)
