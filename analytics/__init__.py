from .course_intelligence import build_course_insights
from .insights import generate_insight_narrative, insight_sentences
from .relevance import find_relevant
from .stats import feedback_summary, most_recent_first, record_time

__all__ = [
    "build_course_insights",
    "generate_insight_narrative",
    "insight_sentences",
    "find_relevant",
    "feedback_summary",
    "most_recent_first",
    "record_time",
]
