"""Storage backend implementations"""

from filesystem_storage.backends.base import (
    ConfirmationRequiredError,
    StorageBackend,
    StorageError,
    StorageFileNotFoundError,
)
from filesystem_storage.backends.local import FileSystemStorage

__all__ = [
    "ConfirmationRequiredError",
    "FileSystemStorage",
    "StorageBackend",
    "StorageError",
    "StorageFileNotFoundError",
]
