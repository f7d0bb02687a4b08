"""Configuration management for LogManager."""

from logmanager.config.loader import ConfigError, ConfigLoader
from logmanager.config.schema import LogManagerConfig

__all__ = ["ConfigError", "ConfigLoader", "LogManagerConfig"]
