"""Whole-course summaries built from a course's shot history.

Everything here is a read-time projection over ShotRecords; nothing is stored.
The tricky-hole score and the club fit are rough proxies (feedback ratio in
place of strokes over par, a fixed reference distance in place of a player's
club profile) and are kept that way on purpose.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from models import ClubInsight, CourseInsights, HoleDetail, ShotRecord, ShotSummary, TrickyHole
from analytics.policy import (
    CLUB_DISTANCE_TOLERANCE,
    HOLE_DETAIL_LIMIT,
    MOST_PLAYED_LIMIT,
    REFERENCE_DISTANCE,
    SOFT_FAIRWAY_MIN_ROUGH,
    TREND_NEGATIVE_MIN_OFF,
    TREND_POSITIVE_MIN_HELPFUL,
    TREND_POSITIVE_MULTIPLIER,
    TRICKY_MIN_OFF,
    TRICKY_SCORE_SCALE,
    UPHILL_MIN_DISTINCT,
    WIND_KEYWORDS,
    WIND_MIN_SHOTS,
)
from analytics.stats import (
    feedback_summary,
    group_by_hole,
    most_recent_first,
    rough_shots,
    uphill_shots,
)

PROFILE_SHORT = "hits short"
PROFILE_LONG = "hits long"
PROFILE_MATCH = "matches profile"


def most_played_holes(by_hole: Dict[int, List[ShotRecord]]) -> List[int]:
    """Holes by descending shot count, ties by hole number."""
    ordered = sorted(by_hole, key=lambda hole: (-len(by_hole[hole]), hole))
    return ordered[:MOST_PLAYED_LIMIT]


def tricky_score(records: Iterable[ShotRecord]) -> float:
    """2 x off/total when negative feedback is the majority, else 0."""
    summary = feedback_summary(records)
    if summary["total"] == 0 or summary["off"] <= summary["helpful"]:
        return 0.0
    return TRICKY_SCORE_SCALE * summary["off"] / summary["total"]


def _tricky_note(uphill_count: int, off_count: int) -> str:
    if uphill_count:
        return f"Plays uphill on {uphill_count} recorded shots. Take extra club."
    if off_count >= TRICKY_MIN_OFF:
        return f"{off_count} recommendations marked off here. Club selection has been unreliable."
    return "Feedback leans negative on this hole."


def tricky_holes(by_hole: Dict[int, List[ShotRecord]]) -> List[TrickyHole]:
    scored = []
    for hole, records in by_hole.items():
        score = tricky_score(records)
        uphill_count = len(uphill_shots(records))
        off_count = feedback_summary(records)["off"]
        if score > 0 or uphill_count or off_count >= TRICKY_MIN_OFF:
            scored.append((score, hole, _tricky_note(uphill_count, off_count)))

    scored.sort(key=lambda row: (-row[0], row[1]))
    return [
        TrickyHole(hole=hole, avg_over_par=f"{score:.1f}", note=note)
        for score, hole, note in scored
    ]


def classify_distance(avg: float, reference: float = REFERENCE_DISTANCE) -> str:
    diff = avg - reference
    if diff < -CLUB_DISTANCE_TOLERANCE:
        return PROFILE_SHORT
    if diff > CLUB_DISTANCE_TOLERANCE:
        return PROFILE_LONG
    return PROFILE_MATCH


def _club_note(club: str, avg: float, profile: str, reference: float) -> str:
    diff = abs(avg - reference)
    if profile == PROFILE_SHORT:
        return f"{club} averages {avg:.0f}, {diff:.0f} shorter than the expected {reference:.0f}. Consider clubbing up."
    if profile == PROFILE_LONG:
        return f"{club} averages {avg:.0f}, {diff:.0f} longer than the expected {reference:.0f}. Consider clubbing down."
    return f"{club} averages {avg:.0f}, in line with the expected {reference:.0f}."


def club_insights(records: Iterable[ShotRecord]) -> List[ClubInsight]:
    """Average distance per club against the reference distance.

    Clubs without any distance samples are skipped.
    """
    distances: Dict[str, List[float]] = {}
    for record in records:
        club = record.club
        if not club:
            continue
        samples = distances.setdefault(club, [])
        if record.distance is not None:
            samples.append(record.distance)

    results = []
    for club, samples in distances.items():
        if not samples:
            continue
        avg = sum(samples) / len(samples)
        profile = classify_distance(avg)
        results.append(
            ClubInsight(
                club=club,
                avg=round(avg, 1),
                profile=profile,
                note=_club_note(club, avg, profile, REFERENCE_DISTANCE),
            )
        )
    return results


def _is_wind_into(wind: Optional[str]) -> bool:
    if not wind:
        return False
    lowered = wind.lower()
    return any(keyword in lowered for keyword in WIND_KEYWORDS)


def ai_notes(records: List[ShotRecord], by_hole: Dict[int, List[ShotRecord]]) -> List[str]:
    """Heuristic narrative notes about the course as a whole."""
    notes = []

    rough_count = len(rough_shots(records))
    if rough_count >= SOFT_FAIRWAY_MIN_ROUGH:
        notes.append(
            f"Soft fairways or heavy rough: {rough_count} shots recorded from the rough on this course."
        )

    for hole in sorted(by_hole):
        windy = [r for r in by_hole[hole] if _is_wind_into(r.wind)]
        if len(windy) >= WIND_MIN_SHOTS:
            notes.append(
                f"Wind into on Hole {hole}: {len(windy)} shots recorded into or in strong wind."
            )

    uphill_values = {r.elevation for r in uphill_shots(records)}
    if len(uphill_values) >= UPHILL_MIN_DISTINCT:
        notes.append(
            f"Several uphill holes: {len(uphill_values)} different uphill elevations recorded. "
            f"Club up on approaches."
        )

    summary = feedback_summary(records)
    helpful, off = summary["helpful"], summary["off"]
    if helpful > TREND_POSITIVE_MULTIPLIER * off and helpful >= TREND_POSITIVE_MIN_HELPFUL:
        notes.append(
            f"Recommendations are working well here: {helpful} helpful vs {off} off."
        )
    elif off > helpful and off >= TREND_NEGATIVE_MIN_OFF:
        notes.append(
            f"Recommendations have struggled here: {off} off vs {helpful} helpful. "
            f"Expect more conservative advice."
        )

    return notes


def hole_details(by_hole: Dict[int, List[ShotRecord]]) -> List[HoleDetail]:
    """Five most recent shots per hole, holes ascending."""
    return [
        HoleDetail(
            hole=hole,
            shots=[
                ShotSummary.from_record(r)
                for r in most_recent_first(by_hole[hole])[:HOLE_DETAIL_LIMIT]
            ],
        )
        for hole in sorted(by_hole)
    ]


def build_course_insights(course_id: str, records: Iterable[ShotRecord]) -> CourseInsights:
    """Aggregate one course's history. No records -> all lists empty."""
    course_id = (course_id or "").strip()
    course_records = [r for r in records if r.course_id == course_id]
    if not course_records:
        return CourseInsights(course_id=course_id)

    by_hole = group_by_hole(course_records)
    return CourseInsights(
        course_id=course_id,
        most_played_holes=most_played_holes(by_hole),
        tricky_holes=tricky_holes(by_hole),
        club_insights=club_insights(course_records),
        ai_notes=ai_notes(course_records, by_hole),
        hole_details=hole_details(by_hole),
    )
