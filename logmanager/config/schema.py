"""Configuration schema definitions for LogManager."""

from dataclasses import dataclass, field
from typing import Optional

from logmanager.utils.constants import (
    DEFAULT_PATTERN,
    VERIFY_TIMEOUT_SECONDS,
    WHICH_TIMEOUT_SECONDS,
)


@dataclass
class GeneralConfig:
    """Settings shared by the files and folders commands."""

    recursive: bool = False
    pattern: str = DEFAULT_PATTERN
    ignore_hidden_files: bool = True


@dataclass
class FilesConfig:
    """Files command settings."""

    date_type: str = "created"  # created, modified


@dataclass
class OutputConfig:
    """Result output settings."""

    format: str = "path"  # path, table, json


@dataclass
class SevenZipConfig:
    """7-Zip lookup settings."""

    extra_paths: list[str] = field(default_factory=list)  # Checked before built-in locations
    which_timeout: float = WHICH_TIMEOUT_SECONDS
    verify_timeout: float = VERIFY_TIMEOUT_SECONDS


@dataclass
class LoggingConfig:
    """Logging configuration settings."""

    level: str = "warning"
    color_output: bool = True
    file_path: Optional[str] = None


@dataclass
class LogManagerConfig:
    """Root configuration object for LogManager."""

    version: str = "1.0"
    general: GeneralConfig = field(default_factory=GeneralConfig)
    files: FilesConfig = field(default_factory=FilesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    sevenzip: SevenZipConfig = field(default_factory=SevenZipConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
