"""Configuration loading and validation for LogManager."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from logmanager.config.schema import (
    FilesConfig,
    GeneralConfig,
    LoggingConfig,
    LogManagerConfig,
    OutputConfig,
    SevenZipConfig,
)

logger = logging.getLogger(__name__)

VALID_DATE_TYPES = ["created", "modified"]
VALID_OUTPUT_FORMATS = ["path", "table", "json"]
VALID_LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


class ConfigError(Exception):
    """Configuration error."""

    pass


class ConfigLoader:
    """Loads configuration from YAML files."""

    DEFAULT_CONFIG_PATHS = [
        Path("logmanager.yaml"),
        Path("logmanager.yml"),
        Path(".logmanager/config.yaml"),
        Path(".logmanager/config.yml"),
    ]

    @classmethod
    def find_config_file(cls) -> Optional[Path]:
        """Return the first default config path that exists, if any."""
        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> LogManagerConfig:
        """
        Load configuration.

        Priority:
        1. Explicit config_path argument
        2. Default config paths (first found)
        3. Built-in defaults

        Args:
            config_path: Optional explicit path to config file

        Returns:
            LogManagerConfig object

        Raises:
            ConfigError: If config file cannot be read or parsed
        """
        config_dict: dict[str, Any] = {}

        if config_path:
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_path}")
            config_dict = cls._load_yaml(config_path)
        else:
            default_path = cls.find_config_file()
            if default_path:
                logger.info(f"Loading config from {default_path}")
                config_dict = cls._load_yaml(default_path)

        return cls._build_config(config_dict)

    @classmethod
    def _load_yaml(cls, path: Path) -> dict[str, Any]:
        """Load YAML file and return dict."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config in {path}: expected a mapping at top level")
        return data

    @classmethod
    def _build_config(cls, data: dict[str, Any]) -> LogManagerConfig:
        """Build LogManagerConfig from dictionary."""
        try:
            return LogManagerConfig(
                version=str(data.get("version", "1.0")),
                general=cls._build_general(data.get("general") or {}),
                files=cls._build_files(data.get("files") or {}),
                output=cls._build_output(data.get("output") or {}),
                sevenzip=cls._build_sevenzip(data.get("sevenzip") or {}),
                logging=cls._build_logging(data.get("logging") or {}),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config value: {e}")

    @classmethod
    def _build_general(cls, data: dict[str, Any]) -> GeneralConfig:
        """Build GeneralConfig from dictionary."""
        config = GeneralConfig()
        if "recursive" in data:
            config.recursive = bool(data["recursive"])
        if "pattern" in data and data["pattern"]:
            config.pattern = str(data["pattern"])
        if "ignore_hidden_files" in data:
            config.ignore_hidden_files = bool(data["ignore_hidden_files"])
        return config

    @classmethod
    def _build_files(cls, data: dict[str, Any]) -> FilesConfig:
        """Build FilesConfig from dictionary."""
        config = FilesConfig()
        if "date_type" in data:
            config.date_type = str(data["date_type"]).lower()
        return config

    @classmethod
    def _build_output(cls, data: dict[str, Any]) -> OutputConfig:
        """Build OutputConfig from dictionary."""
        config = OutputConfig()
        if "format" in data:
            config.format = str(data["format"]).lower()
        return config

    @classmethod
    def _build_sevenzip(cls, data: dict[str, Any]) -> SevenZipConfig:
        """Build SevenZipConfig from dictionary."""
        config = SevenZipConfig()
        if "extra_paths" in data and data["extra_paths"]:
            config.extra_paths = [str(p) for p in data["extra_paths"]]
        if "which_timeout" in data:
            config.which_timeout = float(data["which_timeout"])
        if "verify_timeout" in data:
            config.verify_timeout = float(data["verify_timeout"])
        return config

    @classmethod
    def _build_logging(cls, data: dict[str, Any]) -> LoggingConfig:
        """Build LoggingConfig from dictionary."""
        config = LoggingConfig()
        if "level" in data:
            config.level = str(data["level"])
        if "color_output" in data:
            config.color_output = bool(data["color_output"])
        if "file_path" in data:
            config.file_path = str(data["file_path"]) if data["file_path"] else None
        return config

    @classmethod
    def validate(cls, config: LogManagerConfig) -> list[str]:
        """
        Validate configuration and return list of errors.

        Args:
            config: Configuration to validate

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []

        if config.files.date_type not in VALID_DATE_TYPES:
            errors.append(
                f"Invalid files.date_type: {config.files.date_type}. "
                f"Must be one of: {VALID_DATE_TYPES}"
            )

        if config.output.format not in VALID_OUTPUT_FORMATS:
            errors.append(
                f"Invalid output.format: {config.output.format}. "
                f"Must be one of: {VALID_OUTPUT_FORMATS}"
            )

        if config.logging.level.lower() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid logging level: {config.logging.level}")

        if config.sevenzip.which_timeout <= 0:
            errors.append("sevenzip.which_timeout must be positive")

        if config.sevenzip.verify_timeout <= 0:
            errors.append("sevenzip.verify_timeout must be positive")

        return errors
