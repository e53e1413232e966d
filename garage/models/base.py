from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """Append-only row: an id and the time it was written, nothing else is tracked."""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    # set client-side so a committed row never needs reloading
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
