"""Turn relevant shot history into guidance text for the recommendation prompt."""

from typing import List, Optional, Sequence

from models import Feedback, ShotRecord
from analytics.policy import (
    NEGATIVE_HELPFUL_RATIO,
    POSITIVE_HELPFUL_RATIO,
    POSITIVE_MIN_HELPFUL,
    ROUGH_MIN_GROUP_SHOTS,
)
from analytics.stats import (
    distinct_clubs,
    feedback_summary,
    group_by_hole,
    group_by_shot_type,
    rough_shots,
    uphill_shots,
)

SENTENCE_SEPARATOR = "\n\n"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _clubs_text(clubs: List[str]) -> str:
    return ", ".join(clubs) if clubs else "no recorded club"


def feedback_sentence(hole: int, label: str, group: Sequence[ShotRecord]) -> Optional[str]:
    """Negative or positive pattern sentence, or None on mixed/insufficient signal."""
    summary = feedback_summary(group)
    if summary["total"] == 0:
        return None

    ratio = summary["helpful_ratio"]
    helpful, off, total = summary["helpful"], summary["off"], summary["total"]

    if ratio < NEGATIVE_HELPFUL_RATIO and off > 0:
        return (
            f"Hole {hole} ({label}): past recommendations were marked off "
            f"{off} of {total} times using {_clubs_text(distinct_clubs(group))}. "
            f"Adjust the club or aim for this shot."
        )
    if ratio >= POSITIVE_HELPFUL_RATIO and helpful >= POSITIVE_MIN_HELPFUL:
        worked = distinct_clubs(r for r in group if r.user_feedback == Feedback.HELPFUL)
        return (
            f"Hole {hole} ({label}): past recommendations got positive feedback "
            f"{helpful} of {total} times. {_clubs_text(worked)} worked well here."
        )
    return None


def context_sentences(hole: int, label: str, group: Sequence[ShotRecord]) -> List[str]:
    """Elevation and lie patterns, independent of feedback."""
    sentences = []

    uphill = uphill_shots(group)
    if uphill:
        sentences.append(
            f"Hole {hole} ({label}): {_plural(len(uphill), 'shot')} played uphill here. "
            f"Consider taking more club."
        )

    rough = rough_shots(group)
    if rough and len(group) >= ROUGH_MIN_GROUP_SHOTS:
        sentences.append(
            f"Hole {hole} ({label}): {len(rough)} of {len(group)} shots came from the rough. "
            f"Expect less distance and control from this lie."
        )

    return sentences


def insight_sentences(records: Sequence[ShotRecord]) -> List[str]:
    """All insight sentences, by shot type (first seen) then hole ascending."""
    sentences: List[str] = []
    for shot_type, type_records in group_by_shot_type(records).items():
        label = shot_type or "shot"
        by_hole = group_by_hole(type_records)
        for hole in sorted(by_hole):
            group = by_hole[hole]
            sentence = feedback_sentence(hole, label, group)
            if sentence:
                sentences.append(sentence)
            sentences.extend(context_sentences(hole, label, group))
    return sentences


def generate_insight_narrative(records: Sequence[ShotRecord]) -> str:
    """Blank-line separated insight text. Empty string means no insight available."""
    if not records:
        return ""
    return SENTENCE_SEPARATOR.join(insight_sentences(records))
