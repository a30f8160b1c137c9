"""Storage backend factory"""

import time

from config.settings import Settings, get_settings
from filesystem_storage.backends.local import FileSystemStorage
from logger import get_logger

logger = get_logger(__name__)

CACHE = "cache"
STORE = "store"


def create_storage_backend(subdirectory: str | None = None, settings: Settings | None = None) -> FileSystemStorage:
    """
    Create storage backend based on settings.

    Args:
        subdirectory: Subdirectory under STORAGE_DIRECTORY (None = the directory itself)
        settings: Settings to use instead of the global ones

    Returns:
        FileSystemStorage configured from the STORAGE_* settings
    """
    storage_settings = (settings or get_settings()).storage

    backend = FileSystemStorage(
        storage_settings.directory,
        subdirectory=subdirectory,
        host=storage_settings.host,
        permissions=storage_settings.permissions,
        directory_permissions=storage_settings.directory_permissions,
        clean=storage_settings.clean,
    )

    logger.info(f"LOCAL storage backend created: path={backend.directory} | clean={storage_settings.clean}")
    return backend


def create_storages(settings: Settings | None = None) -> dict[str, FileSystemStorage]:
    """Create the cache and store tiers"""
    storage_settings = (settings or get_settings()).storage
    return {
        CACHE: create_storage_backend(storage_settings.cache_subdirectory, settings),
        STORE: create_storage_backend(storage_settings.store_subdirectory, settings),
    }


def clear_expired_cache(settings: Settings | None = None) -> int:
    """
    Delete cached files older than STORAGE_CLEAR_CACHE_OLDER_THAN_HOURS.

    Meant to be run periodically; empty directories are left in place.

    Returns:
        Number of files deleted
    """
    max_age_hours = (settings or get_settings()).storage.clear_cache_older_than_hours
    cache = get_storages(settings)[CACHE]
    deleted = cache.clear(older_than=time.time() - max_age_hours * 3600)

    if deleted:
        logger.info(f"Cleaned up {deleted} cached files older than {max_age_hours}h")
    return deleted


# Singleton instance
_storages: dict[str, FileSystemStorage] | None = None


def get_storages(settings: Settings | None = None) -> dict[str, FileSystemStorage]:
    """Get the global storage tiers (singleton)"""
    global _storages
    if _storages is None:
        _storages = create_storages(settings)
    return _storages


def reset_storages() -> None:
    """Reset storage tiers singleton (useful for testing)"""
    global _storages
    _storages = None
