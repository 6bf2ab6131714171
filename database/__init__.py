from database.exceptions import DocumentCorruptError, DuplicateError, StorageError
from database.document_store import DocumentStore, InMemoryDocumentStore, JsonFileDocumentStore
from database.shot_store import LoadResult, ShotStore, StoreResult
from database.feedback import FeedbackUpdater
from database.db_manager import ShotMemoryManager
from database.connection import ShotMemoryHandle, db

__all__ = [
    "StorageError",
    "DocumentCorruptError",
    "DuplicateError",
    "DocumentStore",
    "InMemoryDocumentStore",
    "JsonFileDocumentStore",
    "LoadResult",
    "ShotStore",
    "StoreResult",
    "FeedbackUpdater",
    "ShotMemoryManager",
    "ShotMemoryHandle",
    "db",
]
