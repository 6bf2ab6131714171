class StorageError(Exception):
    """Base for all shot store errors."""


class DocumentCorruptError(StorageError):
    """Persisted document is not a JSON array of records."""


class DuplicateError(StorageError):
    """A record with the same id already exists."""
