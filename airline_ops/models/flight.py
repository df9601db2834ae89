from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint, func, select
from sqlalchemy.orm import column_property, relationship

from airline_ops.database import Base
from airline_ops.models.booking import Booking


class Flight(Base):
    __tablename__ = 'flights'
    __table_args__ = (
        UniqueConstraint('destination', 'departure_date', name='uq_flights_destination_departure'),
    )

    id = Column(String(64), primary_key=True)
    destination = Column(String(255), nullable=False)
    departure_date = Column(DateTime, nullable=False, index=True)
    aircraft_id = Column(String(64), ForeignKey('aircraft.id'), nullable=False, index=True)

    # derived on every load, never stored
    booked_seats = column_property(
        select(func.count(Booking.id))
        .where(Booking.flight_id == id)
        .correlate_except(Booking)
        .scalar_subquery()
    )

    aircraft = relationship("Aircraft", back_populates="flights")
    bookings = relationship(
        "Booking",
        back_populates="flight",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Booking.booker_name",
    )

    @property
    def aircraft_name(self):
        return self.aircraft.name

    @property
    def aircraft_capacity(self):
        return self.aircraft.capacity

    @property
    def available_seats(self):
        return self.aircraft.capacity - self.booked_seats

    def __repr__(self):
        return f"<Flight {self.id}>"
