"""Persisted-document primitives backing the shot store.

The store only needs two operations: read the whole document, write the whole
document. Any class with matching method signatures satisfies the protocol.
"""

import logging
import os
import threading
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Optional, Protocol, Union

from database.exceptions import StorageError

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """Interface for whole-document persistence."""

    def load(self) -> Optional[bytes]:
        """Return the stored bytes, or None if nothing has been written yet.

        Raises StorageError when the document exists but cannot be read.
        """
        ...

    def save(self, data: bytes) -> bool:
        """Replace the document. Returns False if the write failed."""
        ...


class JsonFileDocumentStore:
    """Single JSON file on local disk.

    Writes go to a temp file in the same directory and are then moved over the
    target with os.replace, so readers see either the old or the new document.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Optional[bytes]:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc

    def save(self, data: bytes) -> bool:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "wb", dir=self.path.parent, prefix=f".{self.path.name}.", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
            return True
        except OSError:
            logger.exception("Failed to write shot document %s", self.path)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False

    def __repr__(self) -> str:
        return f"JsonFileDocumentStore({str(self.path)!r})"


class InMemoryDocumentStore:
    """Keeps the document in memory. Used in tests and for ephemeral runs."""

    def __init__(self, data: Optional[bytes] = None):
        self._data = data
        self._lock = threading.Lock()
        self.fail_writes = False
        self.save_count = 0

    def load(self) -> Optional[bytes]:
        with self._lock:
            return self._data

    def save(self, data: bytes) -> bool:
        if self.fail_writes:
            logger.error("In-memory document store rejected write")
            return False
        with self._lock:
            self._data = data
            self.save_count += 1
        return True
