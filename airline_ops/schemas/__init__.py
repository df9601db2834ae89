from .aircraft import AircraftSchema
from .booking import (BookingCreateSchema, BookingSchema, BookingTransferSchema, BookingUpdateSchema,
                      BookingWithFlightSchema)
from .common import MessageResponse
from .flight import FlightBaseSchema, FlightSchema

__all__ = [
    "AircraftSchema",
    "BookingCreateSchema",
    "BookingSchema",
    "BookingTransferSchema",
    "BookingUpdateSchema",
    "BookingWithFlightSchema",
    "FlightBaseSchema",
    "FlightSchema",
    "MessageResponse",
]
