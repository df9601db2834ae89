from .aircraft import aircraft_router
from .booking import booking_router
from .flight import flight_router

__all__ = ["aircraft_router", "booking_router", "flight_router"]
