from sqlalchemy import Column, Numeric, String

from garage.models.base import BaseModel


class Booking(BaseModel):
    __tablename__ = "bookings"

    name = Column(String(100), nullable=False)
    contact = Column(String(40), nullable=False)
    vehicle_type = Column(String(20), nullable=False)
    cost = Column(Numeric(10, 2), nullable=False)
