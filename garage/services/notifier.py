import asyncio
import logging
import time
from decimal import Decimal

from garage.core.config import Settings
from garage.core.enums import ServiceType, VehicleClass
from garage.core.exceptions import NotificationError
from garage.core.metrics import sms_deliveries, sms_duration
from garage.services.messaging import MessagingGateway
from garage.services.pricing import to_amount

logger = logging.getLogger(__name__)

CONFIRMATION_TEMPLATE = (
    "Hello {name},\n"
    "Your booking for a {vehicle} is confirmed.\n"
    "Service Type: {service_type}\n"
    "Contact: {contact}\n"
    "Total Cost: {currency}{cost}\n"
    "Thank you for choosing our Garage Service!"
)


def format_confirmation(
    name: str,
    vehicle_class: VehicleClass,
    is_premium: bool,
    contact: str,
    cost: Decimal,
    currency: str = "₹",
) -> str:
    return CONFIRMATION_TEMPLATE.format(
        name=name,
        vehicle=vehicle_class.label,
        service_type=ServiceType.for_membership(is_premium),
        contact=contact,
        currency=currency,
        cost=f"{to_amount(cost):.2f}",
    )


class Notifier:
    """Delivers confirmation messages from the configured origin number."""

    def __init__(self, gateway: MessagingGateway, settings: Settings):
        self.gateway = gateway
        self.origin = settings.MESSAGING_ORIGIN_ID
        self.timeout = settings.MESSAGING_TIMEOUT
        self.currency = settings.CURRENCY_SYMBOL

    def confirmation(self, name: str, vehicle_class: VehicleClass, is_premium: bool,
                     contact: str, cost: Decimal) -> str:
        return format_confirmation(name, vehicle_class, is_premium, contact, cost, self.currency)

    async def notify(self, contact: str, message: str) -> str:
        """Send ``message`` to ``contact`` and return the provider token.

        Raises:
            NotificationError: the gateway rejected the message, failed, or timed out.
        """
        start_time = time.time()
        try:
            token = await asyncio.wait_for(
                self.gateway.send(contact, self.origin, message),
                timeout=self.timeout,
            )
        except NotificationError:
            self._observe("failed", start_time)
            raise
        except asyncio.TimeoutError as exc:
            self._observe("timeout", start_time)
            raise NotificationError(f"Messaging gateway timed out after {self.timeout}s") from exc
        except Exception as exc:
            self._observe("failed", start_time)
            raise NotificationError(f"Failed to send SMS: {exc}") from exc

        self._observe("sent", start_time)
        logger.info(f"SMS sent successfully to {contact}: {token}")
        return token

    def _observe(self, status: str, start_time: float):
        sms_deliveries.labels(status=status).inc()
        sms_duration.labels(status=status).observe(time.time() - start_time)
