from sqlalchemy import Column, Text

from garage.models.base import BaseModel


class Feedback(BaseModel):
    __tablename__ = "feedback"

    feedback_text = Column(Text, nullable=False)
