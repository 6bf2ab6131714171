"""Conversion between the persisted JSON document and Pydantic domain models.

The document is a JSON array of camelCase record objects in append order.
Records stay as plain dicts while the store rewrites the document, so keys the
models do not know about survive a write.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from models import ShotRecord
from database.exceptions import DocumentCorruptError

logger = logging.getLogger(__name__)


# ================================================================
# Document <-> raw dicts
# ================================================================

def decode_document(data: Optional[bytes]) -> List[Any]:
    """bytes -> list of raw entries, unfiltered. Absent document -> [].

    Entries that are not objects are kept so a rewrite of the document
    carries them along; records_from_dicts skips them on the read path.
    """
    if data is None or not data.strip():
        return []
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DocumentCorruptError(f"Shot document is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise DocumentCorruptError(
            f"Shot document must be a JSON array, got {type(payload).__name__}"
        )
    return payload


def encode_document(raw_records: List[Any]) -> bytes:
    """list of raw entries -> bytes."""
    return json.dumps(raw_records, indent=2, ensure_ascii=False).encode("utf-8")


# ================================================================
# Raw dict <-> Model
# ================================================================

def record_from_dict(raw: Dict[str, Any]) -> Optional[ShotRecord]:
    """Raw dict -> ShotRecord, or None if the dict does not hold a valid record."""
    try:
        return ShotRecord.model_validate(raw)
    except ValidationError as exc:
        logger.warning(
            "Skipping malformed shot record %r: %s",
            raw.get("id"),
            exc.errors()[0]["msg"],
        )
        return None


def records_from_dicts(raw_records: List[Any]) -> List[ShotRecord]:
    records = []
    for raw in raw_records:
        if not isinstance(raw, dict):
            logger.warning("Skipping non-object shot entry: %r", raw)
            continue
        record = record_from_dict(raw)
        if record is not None:
            records.append(record)
    return records


def record_to_dict(record: ShotRecord) -> Dict[str, Any]:
    """ShotRecord -> raw dict ready for the document."""
    return record.to_document()
