"""Filesystem storage configuration schema"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from filesystem_storage.path_resolver import strip_leading_separator


class FileSystemStorageConfig(BaseModel):
    """Immutable configuration of a filesystem storage instance."""

    model_config = ConfigDict(frozen=True)

    directory: Path = Field(..., description="Root directory (made absolute)")
    subdirectory: str | None = Field(default=None, description="Directory under root, included in URLs")
    host: str | None = Field(default=None, description="URL prefix, e.g. //abc123.cloudfront.net")
    permissions: int | None = Field(default=None, ge=0, le=0o7777, description="Mode of created files")
    directory_permissions: int | None = Field(default=None, ge=0, le=0o7777, description="Mode of created directories")
    clean: bool = Field(default=True, description="Remove empty directories after deletion")

    @field_validator("directory")
    @classmethod
    def make_absolute(cls, v: Path) -> Path:
        return v.expanduser().absolute()

    @field_validator("subdirectory", mode="before")
    @classmethod
    def make_relative(cls, v):
        """Strip a leading separator so the subdirectory cannot escape the root"""
        if v is None:
            return None
        v = strip_leading_separator(str(v))
        return v or None

    @model_validator(mode="after")
    def default_directory_permissions(self) -> "FileSystemStorageConfig":
        """Apply file permissions to directories too when no separate mode is given"""
        if self.directory_permissions is None and self.permissions is not None:
            object.__setattr__(self, "directory_permissions", self.permissions)
        return self
