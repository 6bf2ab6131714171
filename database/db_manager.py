from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from models import CourseInsights, ShotRecord
from models.shot import utc_now_iso
from analytics.course_intelligence import build_course_insights
from analytics.insights import generate_insight_narrative
from analytics.relevance import find_relevant
from database.converters import decode_document
from database.document_store import DocumentStore, JsonFileDocumentStore
from database.exceptions import StorageError
from database.feedback import FeedbackUpdater
from database.shot_store import ShotStore

logger = logging.getLogger(__name__)


class ShotMemoryManager:
    """
    Entry point the HTTP layer calls into.

    Notes:
    - Every operation is total: degraded storage yields empty results or
      False, never an exception.
    - Reads go straight to the persisted document, so every request sees the
      latest completed write.
    """

    def __init__(self, document_store: DocumentStore) -> None:
        self.shots = ShotStore(document_store)
        self.feedback = FeedbackUpdater(self.shots)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ShotMemoryManager":
        return cls(JsonFileDocumentStore(path))

    # ================================================================
    # Shots
    # ================================================================

    def append_shot(self, record: Union[ShotRecord, Dict[str, Any]]) -> Optional[str]:
        """Store a new shot. Returns its id, or None if it could not be stored."""
        if not isinstance(record, ShotRecord):
            try:
                record = ShotRecord.model_validate(record)
            except ValidationError as exc:
                logger.warning("Rejected malformed shot: %s", exc.errors()[0]["msg"])
                return None

        if record.uploaded_at is None:
            record = record.model_copy(update={"uploaded_at": utc_now_iso()})

        result = self.shots.append(record)
        if not result.ok:
            logger.error("Shot %s not stored: %s", record.id, result.error)
            return None
        return record.id

    def get_all_shots(self) -> List[ShotRecord]:
        return self.shots.get_all().records

    def find_relevant_shots(
        self,
        course_id: Optional[str],
        hole: Optional[int],
        shot_type: Optional[str] = None,
        club: Optional[str] = None,
    ) -> List[ShotRecord]:
        return find_relevant(self.get_all_shots(), course_id, hole, shot_type, club)

    # ================================================================
    # Insights
    # ================================================================

    def generate_insight_narrative(self, relevant_shots: List[ShotRecord]) -> str:
        return generate_insight_narrative(relevant_shots)

    def insights_for(
        self,
        course_id: Optional[str],
        hole: Optional[int],
        shot_type: Optional[str] = None,
        club: Optional[str] = None,
    ) -> str:
        """Relevant history for a new request, rendered as guidance text."""
        return generate_insight_narrative(
            self.find_relevant_shots(course_id, hole, shot_type, club)
        )

    def get_course_intelligence(self, course_id: Optional[str]) -> CourseInsights:
        if not course_id:
            return CourseInsights(course_id="")
        return build_course_insights(course_id, self.get_all_shots())

    # ================================================================
    # Feedback
    # ================================================================

    def submit_feedback(
        self,
        shot_id: Optional[str],
        course_id: Optional[str],
        hole: Optional[int],
        suggested_club: Optional[str],
        feedback: str,
    ) -> bool:
        return self.feedback.submit_feedback(shot_id, course_id, hole, suggested_club, feedback)

    # ================================================================
    # Health
    # ================================================================

    def health_check(self) -> bool:
        """True when the document can be read and parsed (or does not exist yet)."""
        try:
            decode_document(self.shots.document_store.load())
            return True
        except StorageError:
            return False
