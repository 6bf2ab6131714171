from .base import BaseShotModel
from .insights import ClubInsight, CourseInsights, HoleDetail, ShotSummary, TrickyHole
from .shot import Conditions, Feedback, Recommendation, ShotContext, ShotRecord, ShotType

__all__ = [
    "BaseShotModel",
    "ClubInsight",
    "Conditions",
    "CourseInsights",
    "Feedback",
    "HoleDetail",
    "Recommendation",
    "ShotContext",
    "ShotRecord",
    "ShotSummary",
    "ShotType",
    "TrickyHole",
]
