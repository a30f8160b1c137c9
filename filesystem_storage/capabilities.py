"""Capabilities a source must expose to be moved instead of copied"""

import io
import os
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LocalPathSource(Protocol):
    """Source exposing the path of a file on the local filesystem"""

    path: Any


@runtime_checkable
class LocalStorageBackend(Protocol):
    """Backend keeping its files on the local filesystem"""

    def path(self, id: str) -> Path: ...

    def clean(self, id: str) -> None: ...

    def clean_enabled(self) -> bool: ...


@runtime_checkable
class LocalStoredSource(Protocol):
    """Stored file handle whose storage keeps it on the local filesystem"""

    id: str
    storage: Any


def local_path(source: Any) -> Path | None:
    """
    Get filesystem path of a source, if it has one.

    Path-like objects qualify directly, other objects through a ``path``
    attribute. Real file objects (``open()``, ``NamedTemporaryFile``)
    qualify through their ``name``.
    """
    if isinstance(source, os.PathLike):
        return Path(source)
    if isinstance(source, LocalPathSource) and isinstance(source.path, (str, os.PathLike)):
        return Path(source.path)
    if isinstance(source, io.IOBase) or hasattr(source, "file"):
        name = getattr(source, "name", None)
        if isinstance(name, (str, os.PathLike)) and os.path.isfile(name):
            return Path(name)
    return None


def local_stored_source(source: Any) -> LocalStoredSource | None:
    """Get source as a stored handle of a local backend, if it is one"""
    if isinstance(source, LocalStoredSource) and isinstance(source.storage, LocalStorageBackend):
        return source
    return None


def release_temporary_file(source: Any) -> None:
    """Stop a ``NamedTemporaryFile`` from unlinking its name on close after the file was moved away"""
    closer = getattr(source, "_closer", None)
    if closer is not None and hasattr(closer, "delete"):
        closer.delete = False
    if hasattr(source, "_closer") and hasattr(source, "delete"):
        source.delete = False
