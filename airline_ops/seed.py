import logging

from sqlalchemy.orm import Session

from airline_ops.models import Aircraft

logger = logging.getLogger(__name__)

DEFAULT_FLEET = [
    {"id": "AC_001", "name": "Airbus A320", "capacity": 180},
    {"id": "AC_002", "name": "Boeing 737-800", "capacity": 189},
    {"id": "AC_003", "name": "Embraer E190", "capacity": 100},
    {"id": "AC_004", "name": "Bombardier CRJ200", "capacity": 50},
]


def seed_aircraft(db: Session) -> int:
    """Insert the default fleet into an empty aircraft table, returns how many rows were added."""
    if db.query(Aircraft.id).first() is not None:
        return 0
    for entry in DEFAULT_FLEET:
        db.add(Aircraft(**entry))
    db.commit()
    logger.info("Seeded %d aircraft", len(DEFAULT_FLEET))
    return len(DEFAULT_FLEET)
