from garage.models.feedback import Feedback
from garage.schemas.booking import BookingOut, NotificationOut
from garage.schemas.feedback import FeedbackOut
from garage.services.booking import BookingResult, NotificationOutcome


def build_notification_response(outcome: NotificationOutcome) -> NotificationOut:
    return NotificationOut(
        delivered=outcome.delivered,
        token=outcome.token,
        error=outcome.error.message if outcome.error else None,
    )


def build_booking_response(result: BookingResult) -> BookingOut:
    booking = result.booking
    return BookingOut(
        accepted=result.accepted,
        booking_id=booking.id,
        name=booking.name,
        contact=booking.contact,
        vehicle_type=booking.vehicle_type,
        service_type=result.service_type.value,
        cost=booking.cost,
        created_at=booking.created_at,
        notification=build_notification_response(result.notification),
    )


def build_feedback_response(feedback: Feedback) -> FeedbackOut:
    return FeedbackOut(
        accepted=True,
        feedback_id=feedback.id,
        created_at=feedback.created_at,
    )
