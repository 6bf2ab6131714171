from datetime import datetime, timezone
from enum import Enum
from pydantic import ConfigDict, Field, field_validator
from typing import Optional
from uuid import uuid4

from .base import BaseShotModel


class ShotType(str, Enum):
    """Kind of shot the photo was taken for."""
    DRIVE = "drive"
    APPROACH = "approach"
    CHIP = "chip"
    PUTT = "putt"
    RECOVERY = "recovery"


class Feedback(str, Enum):
    """User verdict on a recommendation."""
    HELPFUL = "helpful"
    OFF = "off"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_shot_id() -> str:
    return uuid4().hex


class Recommendation(BaseShotModel):
    """What the caddie suggested for the shot."""
    club: Optional[str] = None
    aim: Optional[str] = None
    avoid: Optional[str] = None
    confidence: Optional[float] = Field(None, ge=0.0, le=1.0)


class Conditions(BaseShotModel):
    wind: Optional[str] = None
    elevation: Optional[str] = None  # "+4ft" uphill, "-2ft" / "flat" otherwise

    @property
    def is_uphill(self) -> bool:
        return bool(self.elevation) and "+" in self.elevation


class ShotContext(BaseShotModel):
    """Lie and playing conditions read from the photo."""
    surface: Optional[str] = None  # "fairway", "rough", "sand", ...
    conditions: Conditions = Field(default_factory=Conditions)

    @field_validator('conditions', mode='before')
    @classmethod
    def default_missing_conditions(cls, v):
        return {} if v is None else v


class ShotRecord(BaseShotModel):
    """One captured shot, the recommendation given, and its outcome.

    Only the feedback fields change after creation. Keys the model does not
    know about are carried along untouched.
    """
    model_config = ConfigDict(extra="allow")

    id: str = Field(default_factory=new_shot_id, min_length=1)
    course_id: str = Field(..., min_length=1)
    hole_number: int = Field(..., ge=1)
    shot_type: Optional[ShotType] = None
    recommendation: Optional[Recommendation] = None
    shot_context: Optional[ShotContext] = None
    club_used: Optional[str] = None
    distance: Optional[float] = None
    user_feedback: Optional[Feedback] = None
    feedback_timestamp: Optional[str] = None
    timestamp: Optional[str] = None
    uploaded_at: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator('course_id')
    @classmethod
    def strip_course_id(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("courseId cannot be blank")
        return v

    @property
    def club(self) -> Optional[str]:
        """Club actually hit, falling back to the recommended one."""
        if self.club_used:
            return self.club_used
        if self.recommendation and self.recommendation.club:
            return self.recommendation.club
        return None

    @property
    def recommended_club(self) -> Optional[str]:
        return self.recommendation.club if self.recommendation else None

    @property
    def surface(self) -> Optional[str]:
        return self.shot_context.surface if self.shot_context else None

    @property
    def elevation(self) -> Optional[str]:
        return self.shot_context.conditions.elevation if self.shot_context else None

    @property
    def wind(self) -> Optional[str]:
        return self.shot_context.conditions.wind if self.shot_context else None

    @property
    def is_uphill(self) -> bool:
        return self.shot_context is not None and self.shot_context.conditions.is_uphill

    @property
    def is_feedback_only(self) -> bool:
        return self.recommendation is None and self.shot_context is None and self.shot_type is None
