from typing import Optional
from datetime import datetime

from pydantic import BaseModel


class FeedbackCreate(BaseModel):
    text: Optional[str] = None


class FeedbackOut(BaseModel):
    accepted: bool
    feedback_id: int
    created_at: Optional[datetime] = None
