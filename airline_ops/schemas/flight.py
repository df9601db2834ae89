from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FlightBaseSchema(BaseModel):
    """Body of POST /flights and PUT /flights/{id}."""

    departure_date: datetime
    destination: str = Field(min_length=1)
    aircraft_id: str = Field(min_length=1)

    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("departure_date")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        # departures are stored without timezone, so equal instants must compare equal
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class FlightSchema(BaseModel):
    id: str
    destination: str
    departure_date: datetime
    aircraft_id: str
    aircraft_name: str
    aircraft_capacity: int
    booked_seats: int
    available_seats: int

    model_config = ConfigDict(from_attributes=True)
