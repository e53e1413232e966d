from decimal import Decimal
from typing import Optional
from datetime import datetime

from pydantic import BaseModel


class BookingCreate(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None
    vehicle_type: Optional[str] = None
    is_premium: bool = False


class NotificationOut(BaseModel):
    delivered: bool
    token: Optional[str] = None
    error: Optional[str] = None


class BookingOut(BaseModel):
    accepted: bool
    booking_id: int
    name: str
    contact: str
    vehicle_type: str
    service_type: str
    cost: Decimal
    created_at: Optional[datetime] = None
    notification: NotificationOut
