from database.connection import db
from database.db_manager import ShotMemoryManager


def get_manager() -> ShotMemoryManager:
    """FastAPI dependency that provides the process-wide ShotMemoryManager."""
    return db.manager
