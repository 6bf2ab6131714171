from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from models import Feedback, ShotRecord
from analytics.policy import ROUGH_SURFACE

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Lenient ISO-8601 parse. Naive values are taken as UTC."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def record_time(record: ShotRecord) -> datetime:
    """Best-known time of a record: timestamp, then uploadedAt, then the epoch."""
    return (
        parse_timestamp(record.timestamp)
        or parse_timestamp(record.uploaded_at)
        or EPOCH
    )


def most_recent_first(records: Iterable[ShotRecord]) -> List[ShotRecord]:
    """Newest first. Stable, so equal times keep their stored order."""
    return sorted(records, key=record_time, reverse=True)


def feedback_summary(records: Iterable[ShotRecord]) -> Dict[str, Any]:
    """
    Count feedback verdicts.

    Output keys:
    - helpful, off: verdict counts
    - total: helpful + off (records without feedback are not counted)
    - helpful_ratio: helpful / total, None when total is 0
    """
    helpful = 0
    off = 0
    for record in records:
        if record.user_feedback == Feedback.HELPFUL:
            helpful += 1
        elif record.user_feedback == Feedback.OFF:
            off += 1
    total = helpful + off
    return {
        "helpful": helpful,
        "off": off,
        "total": total,
        "helpful_ratio": helpful / total if total else None,
    }


def distinct_clubs(records: Iterable[ShotRecord]) -> List[str]:
    """Clubs in first-seen order, without repeats."""
    seen: List[str] = []
    for record in records:
        club = record.club
        if club and club not in seen:
            seen.append(club)
    return seen


def group_by_hole(records: Iterable[ShotRecord]) -> Dict[int, List[ShotRecord]]:
    by_hole: Dict[int, List[ShotRecord]] = {}
    for record in records:
        by_hole.setdefault(record.hole_number, []).append(record)
    return by_hole


def group_by_shot_type(records: Iterable[ShotRecord]) -> Dict[Optional[str], List[ShotRecord]]:
    """Group preserving the order shot types are first seen."""
    by_type: Dict[Optional[str], List[ShotRecord]] = {}
    for record in records:
        by_type.setdefault(record.shot_type, []).append(record)
    return by_type


def is_rough(record: ShotRecord) -> bool:
    surface = record.surface
    return bool(surface) and surface.strip().lower() == ROUGH_SURFACE


def uphill_shots(records: Iterable[ShotRecord]) -> List[ShotRecord]:
    return [r for r in records if r.is_uphill]


def rough_shots(records: Iterable[ShotRecord]) -> List[ShotRecord]:
    return [r for r in records if is_rough(r)]
