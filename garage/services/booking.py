"""Booking pipeline: validate, price and persist, then confirm by SMS.

The two steps report separately. A booking whose row was committed stays
placed even when the confirmation cannot be delivered.
"""
import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garage.core.config import Settings
from garage.core.enums import ServiceType, VehicleClass
from garage.core.exceptions import NotificationError, StorageError, ValidationError
from garage.core.metrics import bookings_placed, track_db_operation
from garage.models.booking import Booking
from garage.services.notifier import Notifier
from garage.services.pricing import price, resolve_vehicle_class

logger = logging.getLogger(__name__)


@dataclass
class NotificationOutcome:
    delivered: bool
    token: Optional[str] = None
    error: Optional[NotificationError] = None


@dataclass
class BookingResult:
    booking: Booking
    vehicle_class: VehicleClass
    service_type: ServiceType
    notification: NotificationOutcome
    accepted: bool = True

    @property
    def cost(self) -> Decimal:
        return self.booking.cost


class BookingRecorder:

    def __init__(self, session: AsyncSession, notifier: Notifier, settings: Settings):
        self.session = session
        self.notifier = notifier
        self.settings = settings
        self.timeout = settings.STORAGE_TIMEOUT

    async def submit_booking(self, name: str, contact: str, vehicle_type, is_premium: bool) -> BookingResult:
        """Place a booking and send its confirmation.

        Raises:
            ValidationError: name or contact is blank, or the vehicle class is unknown.
            StorageError: the booking row could not be written.
        """
        booking, vehicle_class = await self.record_booking(name, contact, vehicle_type, is_premium)
        outcome = await self.send_confirmation(booking, vehicle_class, is_premium)
        return BookingResult(
            booking=booking,
            vehicle_class=vehicle_class,
            service_type=ServiceType.for_membership(is_premium),
            notification=outcome,
        )

    async def record_booking(self, name: str, contact: str, vehicle_type, is_premium: bool):
        name = (name or "").strip()
        contact = (contact or "").strip()
        if not name or not contact:
            raise ValidationError("Please fill in both Name and Contact fields.")

        vehicle_class = resolve_vehicle_class(vehicle_type)
        if vehicle_class is None:
            raise ValidationError(f"Unknown vehicle type: {vehicle_type!r}")

        booking = Booking(
            name=name,
            contact=contact,
            vehicle_type=vehicle_class.value,
            cost=price(vehicle_class, is_premium, self.settings),
        )
        await self._save(booking)

        bookings_placed.labels(
            vehicle_type=vehicle_class.value,
            service_type=ServiceType.for_membership(is_premium).value,
        ).inc()
        logger.info(f"Booking {booking.id} saved to database ({vehicle_class}, cost {booking.cost})")
        return booking, vehicle_class

    async def send_confirmation(self, booking: Booking, vehicle_class: VehicleClass,
                                is_premium: bool) -> NotificationOutcome:
        message = self.notifier.confirmation(
            booking.name, vehicle_class, is_premium, booking.contact, booking.cost
        )
        try:
            token = await self.notifier.notify(booking.contact, message)
        except NotificationError as e:
            logger.warning(f"Booking {booking.id} placed but confirmation SMS failed: {e}")
            return NotificationOutcome(delivered=False, error=e)
        return NotificationOutcome(delivered=True, token=token)

    @track_db_operation("insert", "bookings")
    async def _save(self, booking: Booking):
        try:
            await asyncio.wait_for(self._insert(booking), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            await self.session.rollback()
            logger.error(f"Booking write timed out after {self.timeout}s")
            raise StorageError("Booking could not be saved: storage timed out") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Error saving booking: {exc}")
            raise StorageError("Booking could not be saved") from exc

    async def _insert(self, booking: Booking):
        self.session.add(booking)
        # id and created_at are set by the flush, no reload after the commit
        await self.session.commit()
