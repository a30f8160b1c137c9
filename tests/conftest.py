"""Shared test fixtures for all tests."""

import pytest

from config.settings import Settings, StorageSettings, reset_settings
from filesystem_storage import FileSystemStorage
from filesystem_storage.factory import reset_storages


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop cached settings and storages between tests."""
    reset_settings()
    reset_storages()
    yield
    reset_settings()
    reset_storages()


@pytest.fixture
def root_dir(tmp_path):
    """Root directory of the storage under test."""
    return tmp_path / "public"


@pytest.fixture
def storage(root_dir):
    """Storage without subdirectory (absolute-path URLs)."""
    return FileSystemStorage(root_dir)


@pytest.fixture
def uploads_storage(root_dir):
    """Storage nested in the "uploads" subdirectory."""
    return FileSystemStorage(root_dir, subdirectory="uploads")


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing the storage tiers into a temporary directory."""
    return Settings(storage=StorageSettings(directory=str(tmp_path / "storage")))
