"""Unified storage settings - single source of truth for all configuration"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ============================================================================
# STORAGE SETTINGS
# ============================================================================


class StorageSettings(BaseSettings):
    """Local file storage settings"""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        case_sensitive=False,
    )

    directory: str = Field(default="storage", description="Root directory for all storage tiers")
    cache_subdirectory: str = Field(default="uploads/cache", description="Subdirectory of the cache tier")
    store_subdirectory: str = Field(default="uploads/store", description="Subdirectory of the store tier")
    host: str | None = Field(default=None, description="URL host prefix (e.g. //cdn.example.com)")

    # Permissions (octal modes)
    permissions: int | None = Field(default=None, ge=0, le=0o7777, description="Mode applied to created files")
    directory_permissions: int | None = Field(
        default=None, ge=0, le=0o7777, description="Mode applied to created directories"
    )

    clean: bool = Field(default=True, description="Remove empty directories after deletion")

    # Cache sweep
    clear_cache_older_than_hours: int = Field(
        default=24, ge=1, description="Age after which cached files are removed by the sweep"
    )

    @field_validator("permissions", "directory_permissions", mode="before")
    @classmethod
    def parse_octal_mode(cls, v):
        """Parse modes given as octal strings ("0o644", "0644", "644")"""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            try:
                return int(v.removeprefix("0o"), 8)
            except ValueError:
                raise ValueError(f"Invalid octal mode: {v}") from None
        return v

    @field_validator("host")
    @classmethod
    def empty_host_is_none(cls, v: str | None) -> str | None:
        """Treat an empty host as unset"""
        return v or None


# ============================================================================
# LOGGING SETTINGS
# ============================================================================


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_prefix="LOGGING_",
        case_sensitive=False,
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Logging level")


# ============================================================================
# MAIN SETTINGS
# ============================================================================


class Settings(BaseSettings):
    """Main settings - single source of truth"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# ============================================================================
# SINGLETON INSTANCE
# ============================================================================

_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get settings singleton instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)"""
    global _settings_instance
    _settings_instance = None
