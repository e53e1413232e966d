"""Outbound SMS gateways.

Booking code only depends on ``MessagingGateway``; the Twilio implementation
is picked by the API layer and replaced in tests.
"""
import asyncio
import logging
from typing import Optional, Protocol

from twilio.rest import Client

from garage.core.config import Settings
from garage.core.exceptions import NotificationError

logger = logging.getLogger(__name__)


class MessagingGateway(Protocol):
    async def send(self, destination: str, origin: str, body: str) -> str:
        """Hand one message to the provider and return its confirmation token."""
        ...


class TwilioGateway:
    """Sends SMS through the Twilio REST API. The token is the message SID."""

    def __init__(self, settings: Settings):
        self.account_sid = settings.TWILIO_ACCOUNT_SID
        self.auth_token = settings.TWILIO_AUTH_TOKEN
        self._client: Optional[Client] = None

    @property
    def client(self) -> Client:
        if not self.account_sid or not self.auth_token:
            raise NotificationError("SMS provider not configured")
        if self._client is None:
            self._client = Client(self.account_sid, self.auth_token)
        return self._client

    def _create_message(self, destination: str, origin: str, body: str) -> str:
        message = self.client.messages.create(to=destination, from_=origin, body=body)
        return message.sid

    async def send(self, destination: str, origin: str, body: str) -> str:
        # twilio's client is blocking
        return await asyncio.to_thread(self._create_message, destination, origin, body)
