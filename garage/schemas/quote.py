from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class QuoteRequest(BaseModel):
    vehicle_type: Optional[str] = None
    is_premium: bool = False


class QuoteResponse(BaseModel):
    cost: Decimal
    recognized: bool
    price_breakdown: dict


class RateOut(BaseModel):
    vehicle_type: str
    label: str
    regular_cost: Decimal
    premium_cost: Decimal
