"""Reclaiming of empty directories and expired files"""

import errno
import os
import stat
from pathlib import Path

from logger import get_logger

logger = get_logger(__name__)


class DirectoryCleaner:
    """Best-effort cleanup inside a storage directory.

    Nothing here takes locks. A concurrent writer may repopulate a directory
    between the emptiness check and its removal; that ends the walk quietly.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def clean(self, path: Path) -> list[Path]:
        """
        Remove empty directories upwards from the parent of ``path``.

        Stops at the first non-empty or missing directory and never removes
        the root itself.

        Args:
            path: Path of a (usually just deleted) file

        Returns:
            Removed directories, deepest first
        """
        removed: list[Path] = []
        current = Path(path).parent

        while current != self.root and self.root in current.parents:
            try:
                if any(current.iterdir()):
                    break
                current.rmdir()
            except FileNotFoundError:
                break
            except OSError as e:
                if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                    break
                raise

            removed.append(current)
            current = current.parent

        if removed:
            logger.debug(f"Removed {len(removed)} empty directories up to {removed[-1]}")
        return removed

    def prune_older_than(self, cutoff: float) -> int:
        """
        Delete every file under the root last modified before ``cutoff``.

        Directories are descended into but never removed, even when the
        pass leaves them empty. Symlinked directories are not followed.

        Args:
            cutoff: POSIX timestamp; files with ``st_mtime < cutoff`` are removed

        Returns:
            Number of files deleted
        """
        deleted = 0
        stack = [self.root]

        while stack:
            directory = stack.pop()
            try:
                entries = list(os.scandir(directory))
            except FileNotFoundError:
                continue

            for entry in entries:
                try:
                    st = entry.stat(follow_symlinks=False)
                except FileNotFoundError:
                    continue

                if stat.S_ISDIR(st.st_mode):
                    stack.append(Path(entry.path))
                elif st.st_mtime < cutoff:
                    try:
                        os.unlink(entry.path)
                    except FileNotFoundError:
                        continue
                    deleted += 1

        logger.info(f"Pruned {deleted} files older than cutoff from {self.root}")
        return deleted
