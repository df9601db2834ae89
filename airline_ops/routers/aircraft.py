from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from airline_ops.database import get_db
from airline_ops.models import Aircraft
from airline_ops.schemas.aircraft import AircraftSchema

aircraft_router = APIRouter()


# [...] get all aircraft records
@aircraft_router.get("", response_model=List[AircraftSchema])
def get_aircraft(db: Session = Depends(get_db)):
    return db.query(Aircraft).order_by(Aircraft.id).all()
