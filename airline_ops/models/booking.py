from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from airline_ops.database import Base


class Booking(Base):
    __tablename__ = 'bookings'
    __table_args__ = (
        UniqueConstraint('flight_id', 'booker_name', name='uq_bookings_flight_booker'),
    )

    id = Column(String(64), primary_key=True)
    flight_id = Column(String(64), ForeignKey('flights.id', ondelete='CASCADE'), nullable=False, index=True)
    booker_name = Column(String(255), nullable=False)

    flight = relationship("Flight", back_populates="bookings")

    @property
    def destination(self):
        return self.flight.destination

    @property
    def departure_date(self):
        return self.flight.departure_date

    def __repr__(self):
        return f"<Booking {self.id}>"
