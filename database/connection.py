import logging
import os
import threading
from pathlib import Path
from typing import Optional

from database.db_manager import ShotMemoryManager

logger = logging.getLogger(__name__)

DEFAULT_SHOT_MEMORY_PATH = "data/shots.json"


class ShotMemoryHandle:
    """Owns the process-wide ShotMemoryManager.

    Initialized lazily on first use; one manager (and so one write lock) per
    process.
    """

    def __init__(self):
        self._manager: Optional[ShotMemoryManager] = None
        self._init_lock = threading.Lock()

    @staticmethod
    def _build_path_from_env() -> Path:
        return Path(os.getenv("SHOT_MEMORY_PATH", DEFAULT_SHOT_MEMORY_PATH))

    def initialize(self, path: Optional[str] = None) -> ShotMemoryManager:
        """Create the manager if it does not exist yet. Safe to call repeatedly."""
        with self._init_lock:
            if self._manager is None:
                resolved = Path(path) if path else self._build_path_from_env()
                self._manager = ShotMemoryManager.from_path(resolved)
                logger.info("Shot memory store at %s", resolved.resolve())
            return self._manager

    def install(self, manager: ShotMemoryManager) -> None:
        """Use an already-built manager (tests, alternate document stores)."""
        with self._init_lock:
            self._manager = manager

    def close(self) -> None:
        """Drop the manager so the next use re-initializes. Used by tests."""
        with self._init_lock:
            self._manager = None

    @property
    def manager(self) -> ShotMemoryManager:
        if self._manager is None:
            return self.initialize()
        return self._manager


# Module-level singleton for convenience
db = ShotMemoryHandle()
