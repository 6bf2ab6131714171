"""Record store for shot history.

Every mutation reads the whole document, changes it in memory and writes the
whole document back. Those cycles are serialized by one lock per store, and
the write itself is atomic, so concurrent appends and feedback updates never
lose each other's changes.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from models import Feedback, ShotRecord
from models.shot import utc_now_iso
from database.converters import (
    decode_document,
    encode_document,
    record_to_dict,
    records_from_dicts,
)
from database.document_store import DocumentStore
from database.exceptions import DocumentCorruptError, DuplicateError, StorageError

logger = logging.getLogger(__name__)


@dataclass
class StoreResult:
    """Outcome of a mutation. found is False when the target id was unknown."""
    ok: bool
    error: Optional[str] = None
    found: bool = True


@dataclass
class LoadResult:
    """Records read from the store. error is set when the read degraded to empty."""
    records: List[ShotRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ShotStore:
    """Thread-safe append/update store over a single persisted document."""

    def __init__(self, document_store: DocumentStore):
        self._documents = document_store
        self._write_lock = threading.Lock()

    @property
    def document_store(self) -> DocumentStore:
        return self._documents

    # ================================================================
    # Private helpers
    # ================================================================

    def _read_raw(self, *, for_write: bool) -> List[Any]:
        """Load the raw document entries, including ones that are not records.

        A malformed document reads as empty. An unreadable one raises
        StorageError so a writer never overwrites data it could not see.
        """
        data = self._documents.load()
        try:
            return decode_document(data)
        except DocumentCorruptError as exc:
            if for_write:
                logger.warning("Overwriting malformed shot document: %s", exc)
            else:
                logger.warning("Malformed shot document, treating as empty: %s", exc)
            return []

    def _mutate(self, change: Callable[[List[Any]], StoreResult]) -> StoreResult:
        """Run one read-modify-write cycle under the write lock."""
        with self._write_lock:
            try:
                raw_records = self._read_raw(for_write=True)
            except StorageError as exc:
                logger.error("Shot store read failed, write aborted: %s", exc)
                return StoreResult(ok=False, error=str(exc))

            result = change(raw_records)
            if not result.ok or not result.found:
                return result

            if not self._documents.save(encode_document(raw_records)):
                return StoreResult(ok=False, error="write failed")
            return result

    # ================================================================
    # Read
    # ================================================================

    def get_all(self) -> LoadResult:
        """Every readable record, in append order."""
        try:
            raw_records = self._read_raw(for_write=False)
        except StorageError as exc:
            logger.error("Shot store read failed, treating as empty: %s", exc)
            return LoadResult(records=[], error=str(exc))
        return LoadResult(records=records_from_dicts(raw_records))

    # ================================================================
    # Create
    # ================================================================

    def append(self, record: ShotRecord) -> StoreResult:
        """Insert a fully-formed record at the end of the document."""
        raw = record_to_dict(record)

        def change(raw_records: List[Any]) -> StoreResult:
            if any(
                isinstance(existing, dict) and existing.get("id") == record.id
                for existing in raw_records
            ):
                error = DuplicateError(f"Shot {record.id} already exists")
                logger.warning("%s", error)
                return StoreResult(ok=False, error=str(error))
            raw_records.append(raw)
            return StoreResult(ok=True)

        return self._mutate(change)

    # ================================================================
    # Update
    # ================================================================

    def update_feedback(self, shot_id: str, feedback: Feedback) -> StoreResult:
        """Set userFeedback and feedbackTimestamp on one record.

        Only the feedback fields are touched. An unknown id returns
        ok=True, found=False and leaves the document unwritten.
        """
        verdict = Feedback(feedback).value

        def change(raw_records: List[Any]) -> StoreResult:
            for raw in raw_records:
                if isinstance(raw, dict) and raw.get("id") == shot_id:
                    raw["userFeedback"] = verdict
                    raw["feedbackTimestamp"] = utc_now_iso()
                    return StoreResult(ok=True)
            return StoreResult(ok=True, found=False)

        return self._mutate(change)
