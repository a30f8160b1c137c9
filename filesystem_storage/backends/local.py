"""Local filesystem storage backend"""

import shutil
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import IO, Any, BinaryIO

from filesystem_storage.backends.base import (
    CONFIRM_TOKEN,
    ConfirmationRequiredError,
    StorageBackend,
    StorageError,
    StorageFileNotFoundError,
)
from filesystem_storage.capabilities import local_path, local_stored_source, release_temporary_file
from filesystem_storage.cleaner import DirectoryCleaner
from filesystem_storage.path_resolver import PathResolver
from filesystem_storage.schemas import FileSystemStorageConfig
from filesystem_storage.uploaded_file import UploadedFile
from logger import format_details, get_logger

logger = get_logger(__name__)


class FileSystemStorage(StorageBackend):
    """Local filesystem storage backend.

    Files are stored under ``directory/subdirectory``. With a subdirectory the
    URLs are relative to it, so the same directory can be shared by a cache
    and a store tier (``uploads/cache`` and ``uploads/store``) served by one
    web root. Without one, URLs are absolute filesystem paths.

    Identifiers are not sanitized: ``..`` segments resolve outside the root.
    """

    def __init__(
        self,
        directory: Path | str,
        subdirectory: str | None = None,
        host: str | None = None,
        permissions: int | None = None,
        directory_permissions: int | None = None,
        clean: bool = True,
    ):
        self.config = FileSystemStorageConfig(
            directory=directory,
            subdirectory=subdirectory,
            host=host,
            permissions=permissions,
            directory_permissions=directory_permissions,
            clean=clean,
        )
        self.resolver = PathResolver(
            self.config.directory,
            self.config.subdirectory,
            directory_permissions=self.config.directory_permissions,
        )
        self.cleaner = DirectoryCleaner(self.directory)
        self.log = logger.bind(storage=str(self.subdirectory or self.directory))
        self.initialize()

    @property
    def directory(self) -> Path:
        return self.resolver.directory

    @property
    def subdirectory(self) -> PurePosixPath | None:
        return self.resolver.subdirectory

    @property
    def host(self) -> str | None:
        return self.config.host

    @property
    def permissions(self) -> int | None:
        return self.config.permissions

    def initialize(self) -> None:
        """Create the storage directory and apply permissions (idempotent, never destructive)"""
        self.resolver.make_dirs(self.directory)
        if self.config.directory_permissions is not None:
            self.directory.chmod(self.config.directory_permissions)
        self.log.info(f"Filesystem storage ready: {self.directory}")

    def path(self, id: str) -> Path:
        """Get full path to the file"""
        return self.resolver.resolve(id)

    def upload(self, io: IO[bytes], id: str, **options: Any) -> None:
        path = self.resolver.ensure_parent(id)
        with open(path, "wb") as f:
            shutil.copyfileobj(io, f)
        _rewind(io)
        self._apply_permissions(path)
        self.log.bind(file_id=id).debug(f"Stored file: {path}")

    def open(self, id: str) -> BinaryIO:
        path = self.path(id)
        try:
            return open(path, "rb")
        except FileNotFoundError:
            raise StorageFileNotFoundError(id, path) from None

    def read(self, id: str) -> bytes:
        path = self.path(id)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise StorageFileNotFoundError(id, path) from None

    def exists(self, id: str) -> bool:
        return self.path(id).exists()

    def movable(self, io: Any, id: str) -> bool:
        """True for sources with a local path and for files of a local storage"""
        return local_path(io) is not None or local_stored_source(io) is not None

    def move(self, io: Any, id: str, **options: Any) -> None:
        """
        Move the source into this storage instead of copying it.

        A file of another local storage is moved out of that storage's
        directory, which is then cleaned according to that storage's own
        cleanup policy.

        Raises:
            StorageError: If the source is not movable
        """
        stored = None
        source = local_path(io)
        if source is None:
            stored = local_stored_source(io)
            if stored is None:
                raise StorageError(f"Source is not movable: {io!r}")
            source = stored.storage.path(stored.id)

        destination = self.resolver.ensure_parent(id)
        shutil.move(source, destination)

        if stored is None:
            release_temporary_file(io)
        elif stored.storage.clean_enabled():
            stored.storage.clean(stored.id)

        self._apply_permissions(destination)
        self.log.bind(file_id=id).info(f"Moved file | {format_details(source=source, destination=destination)}")

    def delete(self, id: str) -> None:
        """Delete the file, and by default its directories left empty"""
        path = self.path(id)
        try:
            path.unlink()
        except FileNotFoundError:
            raise StorageFileNotFoundError(id, path) from None
        self.log.bind(file_id=id).debug("Deleted file")

        if self.clean_enabled():
            self.clean(id)

    def clean(self, id: str) -> None:
        """Remove empty directories above the file, up to the storage directory"""
        self.cleaner.clean(self.path(id))

    def clean_enabled(self) -> bool:
        return self.config.clean

    def url(self, id: str, **options: Any) -> str:
        """
        Get URL of the file.

        With a subdirectory, returns ``/subdirectory/id`` relative to the web
        root, prefixed by host when set. Otherwise returns the full path, also
        prefixed by host when set.
        """
        if self.subdirectory:
            return _join_url(self.host or "", self.resolver.relative(id))
        if self.host:
            return _join_url(self.host, self.path(id).as_posix())
        return str(self.path(id))

    def clear(self, confirm: str | None = None, *, older_than: datetime | float | None = None) -> int | None:
        """
        Delete files from the storage directory.

        With ``older_than``, deletes only files last modified before that
        time and returns their count; directories are kept even if left
        empty. Without it, wipes the whole directory, which requires
        ``confirm="confirm"``.

        Raises:
            ConfirmationRequiredError: If wiping without confirmation
        """
        if older_than is not None:
            cutoff = older_than.timestamp() if isinstance(older_than, datetime) else float(older_than)
            return self.cleaner.prune_older_than(cutoff)

        if confirm != CONFIRM_TOKEN:
            self.log.warning(f"Refused to clear {self.directory} without confirmation")
            raise ConfirmationRequiredError()

        shutil.rmtree(self.directory)
        self.initialize()
        self.log.info(f"Cleared storage: {self.directory}")
        return None

    def uploaded_file(self, id: str) -> UploadedFile:
        """Get handle of a file stored under ``id``"""
        return UploadedFile(id=id, storage=self)

    def _apply_permissions(self, path: Path) -> None:
        if self.permissions is not None:
            path.chmod(self.permissions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(directory={str(self.directory)!r})"


def _rewind(io: IO[bytes]) -> None:
    seekable = getattr(io, "seekable", None)
    if seekable is not None and seekable():
        io.seek(0)


def _join_url(host: str, path: str) -> str:
    return host.rstrip("/") + "/" + path.lstrip("/")
