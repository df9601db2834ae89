from sqlalchemy import CheckConstraint, Column, Integer, String
from sqlalchemy.orm import relationship

from airline_ops.database import Base


class Aircraft(Base):
    __tablename__ = 'aircraft'
    __table_args__ = (
        CheckConstraint('capacity > 0', name='ck_aircraft_capacity_positive'),
    )

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    capacity = Column(Integer, nullable=False)

    flights = relationship("Flight", back_populates="aircraft")

    def __repr__(self):
        return f"<Aircraft {self.id}>"
