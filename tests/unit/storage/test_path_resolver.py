"""Unit tests for PathResolver."""

import os
import stat
from pathlib import PurePosixPath

import pytest

from filesystem_storage.path_resolver import PathResolver


@pytest.mark.unit
class TestPathResolver:
    """Tests for identifier to path mapping."""

    def test_resolve_joins_identifier_under_directory(self, tmp_path):
        resolver = PathResolver(tmp_path)

        assert resolver.resolve("image.jpg") == tmp_path / "image.jpg"

    def test_resolve_maps_segments_to_nested_directories(self, tmp_path):
        resolver = PathResolver(tmp_path)

        path = resolver.resolve("a/b/c.txt")

        assert path == tmp_path / "a" / "b" / "c.txt"
        assert str(path).endswith(os.sep.join(["a", "b", "c.txt"]))

    def test_subdirectory_is_nested_under_directory(self, tmp_path):
        resolver = PathResolver(tmp_path, "uploads/store")

        assert resolver.directory == tmp_path / "uploads" / "store"
        assert resolver.resolve("x.jpg") == tmp_path / "uploads" / "store" / "x.jpg"

    def test_leading_separator_of_subdirectory_is_stripped(self, tmp_path):
        resolver = PathResolver(tmp_path, "/uploads")

        assert resolver.subdirectory == PurePosixPath("uploads")
        assert resolver.directory == tmp_path / "uploads"

    def test_resolve_is_pure(self, tmp_path):
        resolver = PathResolver(tmp_path)

        first = resolver.resolve("a/b/c.txt")
        second = resolver.resolve("a/b/c.txt")

        assert first == second
        assert not (tmp_path / "a").exists()

    def test_resolve_does_not_normalize_parent_segments(self, tmp_path):
        """Traversal is left to the caller to prevent."""
        resolver = PathResolver(tmp_path / "root")

        path = resolver.resolve("../escape.txt")

        assert ".." in path.parts
        assert os.path.normpath(path) == str(tmp_path / "escape.txt")

    def test_ensure_parent_creates_missing_directories(self, tmp_path):
        resolver = PathResolver(tmp_path)

        path = resolver.ensure_parent("a/b/c.txt")

        assert path == tmp_path / "a" / "b" / "c.txt"
        assert (tmp_path / "a" / "b").is_dir()
        assert not path.exists()

    def test_ensure_parent_applies_directory_permissions(self, tmp_path):
        resolver = PathResolver(tmp_path, directory_permissions=0o750)

        resolver.ensure_parent("a/b/c.txt")

        assert stat.S_IMODE((tmp_path / "a").stat().st_mode) == 0o750
        assert stat.S_IMODE((tmp_path / "a" / "b").stat().st_mode) == 0o750

    def test_ensure_parent_keeps_existing_directories_untouched(self, tmp_path):
        (tmp_path / "a").mkdir()
        (tmp_path / "a").chmod(0o700)
        resolver = PathResolver(tmp_path, directory_permissions=0o755)

        resolver.ensure_parent("a/b/c.txt")

        assert stat.S_IMODE((tmp_path / "a").stat().st_mode) == 0o700
        assert stat.S_IMODE((tmp_path / "a" / "b").stat().st_mode) == 0o755

    def test_relative_includes_subdirectory(self, tmp_path):
        assert PathResolver(tmp_path, "uploads").relative("a/x.jpg") == "uploads/a/x.jpg"
        assert PathResolver(tmp_path).relative("a/x.jpg") == "a/x.jpg"

    def test_relative_strips_leading_separator_of_identifier(self, tmp_path):
        assert PathResolver(tmp_path, "uploads").relative("/x.jpg") == "uploads/x.jpg"
