from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from garage.core.config import Settings, settings
from garage.db.session import get_db
from garage.services.booking import BookingRecorder
from garage.services.feedback import FeedbackRecorder
from garage.services.messaging import MessagingGateway, TwilioGateway
from garage.services.notifier import Notifier


def get_settings() -> Settings:
    return settings


def get_gateway(config: Settings = Depends(get_settings)) -> MessagingGateway:
    return TwilioGateway(config)


def get_notifier(
    gateway: MessagingGateway = Depends(get_gateway),
    config: Settings = Depends(get_settings),
) -> Notifier:
    return Notifier(gateway, config)


def get_booking_recorder(
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    config: Settings = Depends(get_settings),
) -> BookingRecorder:
    return BookingRecorder(db, notifier, config)


def get_feedback_recorder(
    db: AsyncSession = Depends(get_db),
    config: Settings = Depends(get_settings),
) -> FeedbackRecorder:
    return FeedbackRecorder(db, config)
