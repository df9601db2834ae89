from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingCreateSchema(BaseModel):
    flight_id: str = Field(min_length=1)
    booker_name: str = Field(min_length=1)

    model_config = ConfigDict(coerce_numbers_to_str=True)


class BookingUpdateSchema(BaseModel):
    booker_name: str = Field(min_length=1)
    # only consulted by the duplicate-name check, a rename never moves the booking
    flight_id: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class BookingTransferSchema(BaseModel):
    target_flight_id: str = Field(min_length=1)

    model_config = ConfigDict(coerce_numbers_to_str=True)


class BookingSchema(BaseModel):
    id: str
    flight_id: str
    booker_name: str

    model_config = ConfigDict(from_attributes=True)


class BookingWithFlightSchema(BookingSchema):
    destination: str
    departure_date: datetime
