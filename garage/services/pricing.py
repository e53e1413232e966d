from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional, Union

from garage.schemas.quote import QuoteRequest, QuoteResponse, RateOut
from garage.core.config import Settings, settings
from garage.core.enums import VehicleClass

UNRECOGNIZED = Decimal("0.00")

CENT = Decimal("0.01")


def to_amount(value: Decimal) -> Decimal:
    """Every amount shown, stored or sent is rounded half-up to the cent."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def base_costs(config: Optional[Settings] = None) -> Dict[VehicleClass, Decimal]:
    config = config or settings
    return {
        VehicleClass.TWO_WHEELER: config.TWO_WHEELER_COST,
        VehicleClass.THREE_WHEELER: config.THREE_WHEELER_COST,
        VehicleClass.FOUR_WHEELER: config.FOUR_WHEELER_COST,
    }


def resolve_vehicle_class(value: Union[VehicleClass, str, None]) -> Optional[VehicleClass]:
    if value is None:
        return None
    try:
        return VehicleClass(value)
    except ValueError:
        return None


def base_cost(vehicle_class: Union[VehicleClass, str, None], config: Optional[Settings] = None) -> Decimal:
    resolved = resolve_vehicle_class(vehicle_class)
    if resolved is None:
        return UNRECOGNIZED
    return to_amount(base_costs(config)[resolved])


def price(vehicle_class: Union[VehicleClass, str, None], is_premium: bool,
          config: Optional[Settings] = None) -> Decimal:
    """Cost of one service. Returns 0.00 for anything that is not a known vehicle class."""
    config = config or settings
    amount = base_cost(vehicle_class, config)
    if is_premium:
        amount = amount * (1 - config.PREMIUM_DISCOUNT_PERCENT / 100)
    return to_amount(amount)


async def calculate_price(req: QuoteRequest, config: Optional[Settings] = None) -> QuoteResponse:
    base = base_cost(req.vehicle_type, config)
    final_price = price(req.vehicle_type, req.is_premium, config)

    breakdown = {
        "base_price": base,
        "premium_discount": to_amount(base - final_price),
    }
    return QuoteResponse(
        cost=final_price,
        recognized=resolve_vehicle_class(req.vehicle_type) is not None,
        price_breakdown=breakdown,
    )


def rate_card(config: Optional[Settings] = None) -> list:
    return [
        RateOut(
            vehicle_type=vehicle_class.value,
            label=vehicle_class.label,
            regular_cost=price(vehicle_class, False, config),
            premium_cost=price(vehicle_class, True, config),
        )
        for vehicle_class in VehicleClass
    ]
