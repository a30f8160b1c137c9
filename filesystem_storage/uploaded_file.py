"""Handle of a file stored by a storage backend"""

from typing import IO, TYPE_CHECKING, Any, BinaryIO

if TYPE_CHECKING:
    from filesystem_storage.backends.base import StorageBackend


class UploadedFile:
    """Stored file, identified by its storage and identifier.

    Operations are delegated to the storage. Storages that keep files on the
    local filesystem accept handles like this one in ``move``.
    """

    def __init__(self, id: str, storage: "StorageBackend"):
        self.id = id
        self.storage = storage

    def open(self) -> BinaryIO:
        return self.storage.open(self.id)

    def read(self) -> bytes:
        return self.storage.read(self.id)

    def download(self) -> IO[bytes]:
        return self.storage.download(self.id)

    def exists(self) -> bool:
        return self.storage.exists(self.id)

    def url(self, **options: Any) -> str:
        return self.storage.url(self.id, **options)

    def delete(self) -> None:
        self.storage.delete(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UploadedFile):
            return NotImplemented
        return self.id == other.id and self.storage is other.storage

    def __hash__(self) -> int:
        return hash((self.id, id(self.storage)))

    def __repr__(self) -> str:
        return f"UploadedFile(id={self.id!r}, storage={self.storage!r})"
