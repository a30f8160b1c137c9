"""Abstract storage backend interface"""

import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import IO, Any, BinaryIO

CONFIRM_TOKEN = "confirm"


class StorageBackend(ABC):
    """Abstract storage backend interface for file operations.

    Backends are addressed by opaque identifiers. Only ``upload``, ``open``,
    ``exists``, ``delete`` and ``url`` are mandatory; ``read`` and
    ``download`` are derived from ``open``. Backends that can relocate files
    cheaply also provide ``movable`` and ``move``, and may provide ``clear``.
    """

    @abstractmethod
    def upload(self, io: IO[bytes], id: str, **options: Any) -> None:
        """
        Persist content under the given identifier.

        Args:
            io: Readable binary stream, rewound after copying when seekable
            id: Identifier of the stored file
        """

    @abstractmethod
    def open(self, id: str) -> BinaryIO:
        """
        Open stored file for reading.

        Raises:
            StorageFileNotFoundError: If file doesn't exist
        """

    @abstractmethod
    def exists(self, id: str) -> bool:
        """Check if file exists in storage."""

    @abstractmethod
    def delete(self, id: str) -> None:
        """
        Delete file from storage.

        Raises:
            StorageFileNotFoundError: If file doesn't exist
        """

    @abstractmethod
    def url(self, id: str, **options: Any) -> str:
        """Return URL under which the file is addressable."""

    def read(self, id: str) -> bytes:
        """Return full content of the stored file."""
        with self.open(id) as f:
            return f.read()

    def download(self, id: str) -> IO[bytes]:
        """
        Copy stored file into a new temporary file.

        Returns:
            Open temporary file rewound to the start
        """
        tmp = tempfile.NamedTemporaryFile(prefix="download_", suffix=PurePosixPath(id).suffix)
        try:
            with self.open(id) as src:
                shutil.copyfileobj(src, tmp)
            tmp.flush()
            tmp.seek(0)
        except BaseException:
            tmp.close()
            raise
        return tmp


class StorageError(Exception):
    """Base exception for storage backends"""


class StorageFileNotFoundError(StorageError, FileNotFoundError):
    """Raised when an operation targets a missing identifier"""

    def __init__(self, id: str, path: Any = None):
        self.id = id
        self.path = path
        super().__init__(f"File not found: {id}" + (f" ({path})" if path is not None else ""))


class ConfirmationRequiredError(StorageError):
    """Raised when a full clear is invoked without confirmation"""

    def __init__(self) -> None:
        super().__init__(f"Clearing the whole storage requires confirm={CONFIRM_TOKEN!r}")
