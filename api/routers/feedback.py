"""Recommendation feedback endpoint."""

from fastapi import APIRouter, Depends

from database.db_manager import ShotMemoryManager
from api.dependencies import get_manager
from api.schemas import FeedbackRequest, FeedbackResponse

router = APIRouter()


@router.post("", response_model=FeedbackResponse)
def submit_feedback(body: FeedbackRequest, manager: ShotMemoryManager = Depends(get_manager)):
    success = manager.submit_feedback(
        body.shot_id,
        body.course_id,
        body.hole,
        body.suggested_club,
        body.feedback.value,
    )
    return FeedbackResponse(success=success)
