import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garage.core.config import Settings
from garage.core.exceptions import StorageError, ValidationError
from garage.core.metrics import track_db_operation
from garage.models.feedback import Feedback

logger = logging.getLogger(__name__)


class FeedbackRecorder:
    """Stores free-text comments. Feedback is not tied to any booking."""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.timeout = settings.STORAGE_TIMEOUT

    async def submit_feedback(self, text: str) -> Feedback:
        text = (text or "").strip()
        if not text:
            raise ValidationError("Please enter feedback before submitting.")

        feedback = Feedback(feedback_text=text)
        await self._save(feedback)
        logger.info(f"Feedback {feedback.id} saved to database")
        return feedback

    @track_db_operation("insert", "feedback")
    async def _save(self, feedback: Feedback):
        try:
            await asyncio.wait_for(self._insert(feedback), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            await self.session.rollback()
            logger.error(f"Feedback write timed out after {self.timeout}s")
            raise StorageError("Feedback could not be saved: storage timed out") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Error saving feedback: {exc}")
            raise StorageError("Feedback could not be saved") from exc

    async def _insert(self, feedback: Feedback):
        self.session.add(feedback)
        # id and created_at are set by the flush, no reload after the commit
        await self.session.commit()
