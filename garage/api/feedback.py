from fastapi import APIRouter, Depends

from garage.core.dependencies import get_feedback_recorder
from garage.core.response_builders import build_feedback_response
from garage.schemas.feedback import FeedbackCreate, FeedbackOut
from garage.services.feedback import FeedbackRecorder

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("/", response_model=FeedbackOut)
async def submit_feedback(
    payload: FeedbackCreate,
    recorder: FeedbackRecorder = Depends(get_feedback_recorder),
):
    feedback = await recorder.submit_feedback(payload.text)
    return build_feedback_response(feedback)
