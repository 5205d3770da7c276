"""Storage-layer exceptions. Typed, no HTTP, no domain rules."""


class StorageError(Exception):
    """Base for all storage-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RecordNotFoundError(StorageError):
    """Raised when updating a key that holds no record."""


class RecordTooLargeError(StorageError):
    """Raised when an encoded record exceeds the maximum value size."""


class RecordCorruptedError(StorageError):
    """Raised when stored bytes cannot be decoded back into a record."""


class StorageWriteError(StorageError):
    """Raised when the backing database rejects a write."""
