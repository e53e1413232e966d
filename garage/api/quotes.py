"""Live cost preview for the booking form"""
from typing import List

from fastapi import APIRouter, Depends

from garage.core.config import Settings
from garage.core.dependencies import get_settings
from garage.schemas.quote import QuoteRequest, QuoteResponse, RateOut
from garage.services.pricing import calculate_price, rate_card

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("/calc", response_model=QuoteResponse)
async def calc_quote(req: QuoteRequest, config: Settings = Depends(get_settings)):
    return await calculate_price(req, config)


@router.get("/rates", response_model=List[RateOut])
async def list_rates(config: Settings = Depends(get_settings)):
    return rate_card(config)
