from pydantic import BaseModel, ConfigDict


class AircraftSchema(BaseModel):
    id: str
    name: str
    capacity: int

    model_config = ConfigDict(from_attributes=True)
