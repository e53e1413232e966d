from decimal import Decimal
from typing import List, Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./garage.db"
    DATABASE_USER: Optional[str] = None
    DATABASE_PASSWORD: Optional[str] = None
    STORAGE_TIMEOUT: float = 5.0

    # Twilio account that owns MESSAGING_ORIGIN_ID
    TWILIO_ACCOUNT_SID: str = ""
    TWILIO_AUTH_TOKEN: str = ""
    MESSAGING_ORIGIN_ID: str = "+12813469685"
    MESSAGING_TIMEOUT: float = 10.0

    # rate card; bookings store the derived cost, so changes only affect new bookings
    TWO_WHEELER_COST: Decimal = Decimal("500")
    THREE_WHEELER_COST: Decimal = Decimal("750")
    FOUR_WHEELER_COST: Decimal = Decimal("1000")
    PREMIUM_DISCOUNT_PERCENT: Decimal = Decimal("10")

    CURRENCY_SYMBOL: str = "₹"

    CORS_ORIGINS: List[str] = ["*"]

    API_TITLE: str = "Garage Service Booking"
    API_DESCRIPTION: str = "Books garage services, records customer feedback and sends SMS confirmations"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def database_url(self) -> URL:
        """DATABASE_URL with DATABASE_USER/DATABASE_PASSWORD applied when set."""
        url = make_url(self.DATABASE_URL)
        if self.DATABASE_USER:
            url = url.set(username=self.DATABASE_USER)
        if self.DATABASE_PASSWORD:
            url = url.set(password=self.DATABASE_PASSWORD)
        return url

    @property
    def messaging_configured(self) -> bool:
        return bool(self.TWILIO_ACCOUNT_SID and self.TWILIO_AUTH_TOKEN)


settings = Settings()
