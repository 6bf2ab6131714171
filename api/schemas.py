"""API-specific request and response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from models import Feedback, ShotRecord


class ApiModel(BaseModel):
    """Accepts camelCase or snake_case, answers in camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AppendShotResponse(ApiModel):
    id: Optional[str] = None
    stored: bool


class RelevantShotsResponse(ApiModel):
    """Relevant history for a new request plus the guidance text built from it."""
    shots: List[ShotRecord]
    insights: str


class FeedbackRequest(ApiModel):
    shot_id: Optional[str] = None
    course_id: str = Field(..., min_length=1)
    hole: int = Field(..., ge=1)
    suggested_club: Optional[str] = None
    feedback: Feedback


class FeedbackResponse(ApiModel):
    success: bool
