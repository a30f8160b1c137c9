"""Storage path resolver for consistent path generation"""

import os
from pathlib import Path, PurePosixPath

from logger import get_logger

logger = get_logger(__name__)


class PathResolver:
    """Map identifiers to paths under the storage directory.

    Identifiers use ``/`` as separator regardless of platform. ``..`` segments
    are not normalized, so identifiers coming from untrusted input must be
    sanitized by the caller.
    """

    def __init__(
        self,
        directory: Path | str,
        subdirectory: PurePosixPath | str | None = None,
        directory_permissions: int | None = None,
    ):
        """
        Initialize path resolver.

        Args:
            directory: Base directory for storage
            subdirectory: Optional directory nested under ``directory``, also used in URLs
            directory_permissions: Mode applied to directories created by ``ensure_parent``
        """
        self.subdirectory = PurePosixPath(strip_leading_separator(str(subdirectory))) if subdirectory else None
        self.base = Path(directory)
        self.directory = self.base.joinpath(*self.subdirectory.parts) if self.subdirectory else self.base
        self.directory_permissions = directory_permissions

    def resolve(self, id: str) -> Path:
        """
        Get path to stored file.

        Returns:
            Path like: storage/uploads/store/a/b/image.jpg
        """
        return self.directory / id.replace("/", os.sep)

    def ensure_parent(self, id: str) -> Path:
        """Get path to stored file, creating missing parent directories"""
        path = self.resolve(id)
        self.make_dirs(path.parent)
        return path

    def make_dirs(self, directory: Path) -> None:
        """Create directory with its missing parents, applying directory permissions to each created one"""
        missing: list[Path] = []
        current = directory
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent

        for path in reversed(missing):
            path.mkdir(exist_ok=True)
            if self.directory_permissions is not None:
                path.chmod(self.directory_permissions)

        if missing:
            logger.debug(f"Created directories: {missing[-1]} .. {directory}")

    def relative(self, id: str) -> str:
        """Get identifier path relative to the URL root (``subdirectory/id``)"""
        if self.subdirectory:
            return str(self.subdirectory / strip_leading_separator(id))
        return id


def strip_leading_separator(path: str) -> str:
    return path.lstrip("/")
