from pydantic import Field
from typing import List, Optional

from .base import BaseShotModel
from .shot import ShotRecord


class ShotSummary(BaseShotModel):
    """Display-safe projection of a ShotRecord (no image locator)."""
    id: str
    shot_type: Optional[str] = None
    club: Optional[str] = None
    aim: Optional[str] = None
    user_feedback: Optional[str] = None
    distance: Optional[float] = None
    surface: Optional[str] = None
    elevation: Optional[str] = None
    wind: Optional[str] = None
    timestamp: Optional[str] = None

    @classmethod
    def from_record(cls, record: ShotRecord) -> "ShotSummary":
        return cls(
            id=record.id,
            shot_type=record.shot_type,
            club=record.club,
            aim=record.recommendation.aim if record.recommendation else None,
            user_feedback=record.user_feedback,
            distance=record.distance,
            surface=record.surface,
            elevation=record.elevation,
            wind=record.wind,
            timestamp=record.timestamp or record.uploaded_at,
        )


class TrickyHole(BaseShotModel):
    hole: int
    avg_over_par: str  # one decimal, e.g. "1.5"
    note: str


class ClubInsight(BaseShotModel):
    club: str
    avg: float
    profile: str  # "hits short" | "hits long" | "matches profile"
    note: str


class HoleDetail(BaseShotModel):
    hole: int
    shots: List[ShotSummary] = Field(default_factory=list)


class CourseInsights(BaseShotModel):
    """Read-time summary of one course's shot history. Never persisted."""
    course_id: str
    most_played_holes: List[int] = Field(default_factory=list)
    tricky_holes: List[TrickyHole] = Field(default_factory=list)
    club_insights: List[ClubInsight] = Field(default_factory=list)
    ai_notes: List[str] = Field(default_factory=list)
    hole_details: List[HoleDetail] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.most_played_holes
            or self.tricky_holes
            or self.club_insights
            or self.ai_notes
            or self.hole_details
        )
