from .aircraft import Aircraft
from .booking import Booking
from .flight import Flight

__all__ = ["Aircraft", "Booking", "Flight"]
