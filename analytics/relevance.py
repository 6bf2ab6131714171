"""Select prior shots that share course and hole with a new request."""

from typing import Iterable, List, Optional

from models import ShotRecord
from analytics.stats import most_recent_first


def is_relevant(
    record: ShotRecord,
    course_id: str,
    hole_number: int,
    shot_type: Optional[str] = None,
    club: Optional[str] = None,
) -> bool:
    """Same course and same hole, plus shot type / recommended club when given.

    Course-only matches never qualify; other holes are not a stand-in for
    same-hole history.
    """
    if record.course_id != course_id or record.hole_number != hole_number:
        return False
    if shot_type and record.shot_type != shot_type:
        return False
    if club and record.recommended_club != club:
        return False
    return True


def find_relevant(
    records: Iterable[ShotRecord],
    course_id: Optional[str],
    hole_number: Optional[int],
    shot_type: Optional[str] = None,
    club: Optional[str] = None,
) -> List[ShotRecord]:
    """Matching records, newest first (timestamp, then uploadedAt, then epoch)."""
    course_id = course_id.strip() if course_id else course_id
    if not course_id or hole_number is None:
        return []
    matches = [
        r for r in records
        if is_relevant(r, course_id, hole_number, shot_type, club)
    ]
    return most_recent_first(matches)
