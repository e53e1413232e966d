from fastapi import APIRouter, Depends

from garage.core.dependencies import get_booking_recorder
from garage.core.response_builders import build_booking_response
from garage.schemas.booking import BookingCreate, BookingOut
from garage.services.booking import BookingRecorder

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("/", response_model=BookingOut)
async def create_booking(
    payload: BookingCreate,
    recorder: BookingRecorder = Depends(get_booking_recorder),
):
    """Book a service. The response carries the SMS outcome; a failed SMS does not fail the booking."""
    result = await recorder.submit_booking(
        payload.name,
        payload.contact,
        payload.vehicle_type,
        payload.is_premium,
    )
    return build_booking_response(result)
