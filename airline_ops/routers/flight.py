from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from airline_ops.database import get_db
from airline_ops.schemas.booking import BookingSchema
from airline_ops.schemas.common import MessageResponse
from airline_ops.schemas.flight import FlightBaseSchema, FlightSchema
from airline_ops.services import bookings as booking_service
from airline_ops.services import flights as flight_service

flight_router = APIRouter()


# [...] get all flight records
@flight_router.get("", response_model=List[FlightSchema])
def get_flights(db: Session = Depends(get_db)):
    return flight_service.list_flights(db)


# [...] add a new flight record
@flight_router.post("", response_model=FlightSchema, status_code=status.HTTP_201_CREATED)
def add_flight(flight: FlightBaseSchema, db: Session = Depends(get_db)):
    return flight_service.create_flight(db, flight)


# [...] get a single flight record
@flight_router.get("/{flight_id}", response_model=FlightSchema)
def get_flight(flight_id: str, db: Session = Depends(get_db)):
    return flight_service.get_flight(db, flight_id)


# [...] edit a flight record
@flight_router.put("/{flight_id}", response_model=FlightSchema)
def update_flight(flight_id: str, flight: FlightBaseSchema, db: Session = Depends(get_db)):
    return flight_service.update_flight(db, flight_id, flight)


# [...] delete a flight record and its bookings
@flight_router.delete("/{flight_id}", response_model=MessageResponse)
def delete_flight(flight_id: str, db: Session = Depends(get_db)):
    flight_service.delete_flight(db, flight_id)
    return {"message": "Flight deleted successfully"}


# [...] get the bookings of a flight
@flight_router.get("/{flight_id}/bookings", response_model=List[BookingSchema])
def get_flight_bookings(flight_id: str, db: Session = Depends(get_db)):
    return booking_service.list_flight_bookings(db, flight_id)
