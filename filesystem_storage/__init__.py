"""Local filesystem storage for uploaded files"""

from filesystem_storage.backends.base import (
    CONFIRM_TOKEN,
    ConfirmationRequiredError,
    StorageBackend,
    StorageError,
    StorageFileNotFoundError,
)
from filesystem_storage.backends.local import FileSystemStorage
from filesystem_storage.cleaner import DirectoryCleaner
from filesystem_storage.factory import create_storage_backend, create_storages, get_storages
from filesystem_storage.path_resolver import PathResolver
from filesystem_storage.uploaded_file import UploadedFile

__all__ = [
    "CONFIRM_TOKEN",
    "ConfirmationRequiredError",
    "DirectoryCleaner",
    "FileSystemStorage",
    "PathResolver",
    "StorageBackend",
    "StorageError",
    "StorageFileNotFoundError",
    "UploadedFile",
    "create_storage_backend",
    "create_storages",
    "get_storages",
]
