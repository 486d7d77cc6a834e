"""
Configuration Schema and Models

Defines Pydantic models for run options and the optional configuration file,
providing validation, default values, and extension normalization.

Author: StemPrune Project
License: MIT
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pathlib import Path

from ..utils.file_ops import normalize_extension


class LogLevel(str, Enum):
    """Logging level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _normalize_extensions(v):
    if isinstance(v, str):
        v = v.split(",")
    if isinstance(v, (list, tuple)):
        normalized = []
        for ext in v:
            if not isinstance(ext, str):
                raise ValueError(f"Extension must be a string: {ext!r}")
            ext = normalize_extension(ext)
            if not ext:
                raise ValueError("Extensions must not be empty")
            normalized.append(ext)
        return normalized
    return v


class DedupOptions(BaseModel):
    """Options for a single deduplication run over one directory."""

    in_dir: Path = Field(
        description="Directory whose entries are grouped by stem"
    )
    keep: List[str] = Field(
        description="Extensions to keep, highest priority first"
    )
    recursive: bool = Field(
        default=False,
        description="Process subdirectories as well"
    )
    move_to: Optional[Path] = Field(
        default=None,
        description="Move discarded files here instead of deleting them"
    )

    @field_validator("keep", mode="before")
    @classmethod
    def normalize_keep(cls, v):
        """Normalize extensions, dropping a leading dot."""
        return _normalize_extensions(v)

    @field_validator("keep")
    @classmethod
    def require_keep(cls, v):
        """At least one extension is needed to select a keeper."""
        if not v:
            raise ValueError("At least one extension to keep is required")
        return v

    def with_subdir(self, subdir: str) -> "DedupOptions":
        """
        Options for a subdirectory of in_dir.

        Both the input directory and the move destination gain the
        subdirectory name, so moved files mirror the source tree.
        """
        return self.model_copy(update={
            "in_dir": self.in_dir / subdir,
            "move_to": self.move_to / subdir if self.move_to is not None else None,
        })


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Application logging level"
    )
    log_to_file: bool = Field(
        default=False,
        description="Enable logging to file"
    )
    log_file_path: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Log file location (used when log_to_file is set)"
    )
    log_rotation_size: int = Field(
        default=10485760,  # 10MB
        description="Log file size before rotation (bytes)"
    )
    log_retention_count: int = Field(
        default=5,
        description="Number of rotated log files to keep"
    )
    json_format: bool = Field(
        default=False,
        description="Format log records as JSON"
    )

    @field_validator("log_file_path")
    @classmethod
    def require_path_for_file_logging(cls, v, info: ValidationInfo):
        """A file path is mandatory once file logging is on."""
        if info.data.get("log_to_file") and not v:
            raise ValueError("log_file_path is required when log_to_file is enabled")
        return v


class DefaultsConfig(BaseModel):
    """Defaults applied when the command line leaves an option out."""

    keep: List[str] = Field(
        default=[],
        description="Default keep list, highest priority first"
    )
    recursive: bool = Field(
        default=False,
        description="Recurse by default"
    )
    move_to: Optional[str] = Field(
        default=None,
        description="Default move destination"
    )

    @field_validator("keep", mode="before")
    @classmethod
    def normalize_keep(cls, v):
        """Normalize extensions, dropping a leading dot."""
        if v is None:
            return []
        return _normalize_extensions(v)


class Config(BaseModel):
    """
    Root configuration model for StemPrune.

    Loaded from an optional YAML file and overridden by environment
    variables. Command-line arguments take precedence over both.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)
