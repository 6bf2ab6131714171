"""Apply user feedback to shot history."""

import logging
from typing import Optional

from pydantic import ValidationError

from models import Feedback, ShotRecord
from models.shot import utc_now_iso
from database.shot_store import ShotStore, StoreResult

logger = logging.getLogger(__name__)


class FeedbackUpdater:
    """Routes a feedback verdict to an existing shot or a feedback-only record."""

    def __init__(self, store: ShotStore):
        self._store = store

    def submit(
        self,
        shot_id: Optional[str],
        course_id: Optional[str],
        hole: Optional[int],
        suggested_club: Optional[str],
        feedback: str,
    ) -> StoreResult:
        """Record the verdict.

        With shot_id the existing record is updated; an unknown id is a no-op
        (found=False) so repeated submissions stay harmless. Without shot_id a
        standalone record carrying only the feedback fields is appended.
        """
        try:
            verdict = Feedback(feedback)
        except ValueError:
            logger.warning("Ignoring unrecognised feedback verdict %r", feedback)
            return StoreResult(ok=True, found=False)

        if shot_id:
            result = self._store.update_feedback(shot_id, verdict)
            if result.ok and not result.found:
                logger.info("Feedback for unknown shot %s ignored", shot_id)
            return result

        now = utc_now_iso()
        try:
            record = ShotRecord(
                course_id=course_id,
                hole_number=hole,
                club_used=suggested_club or None,
                user_feedback=verdict,
                feedback_timestamp=now,
                timestamp=now,
                uploaded_at=now,
            )
        except ValidationError as exc:
            logger.warning("Feedback without a valid course/hole ignored: %s", exc.errors()[0]["msg"])
            return StoreResult(ok=True, found=False)
        return self._store.append(record)

    def submit_feedback(
        self,
        shot_id: Optional[str],
        course_id: Optional[str],
        hole: Optional[int],
        suggested_club: Optional[str],
        feedback: str,
    ) -> bool:
        """Acknowledge-style wrapper: False only when storage failed."""
        result = self.submit(shot_id, course_id, hole, suggested_club, feedback)
        if not result.ok:
            logger.error("Feedback could not be stored: %s", result.error)
        return result.ok
