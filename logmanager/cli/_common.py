"""Shared state and utilities for CLI commands.

This module centralizes common CLI dependencies to support
the modular command structure (files_cmd, folders_cmd, etc.).
"""

from rich.console import Console

from logmanager.config import ConfigError, ConfigLoader, LogManagerConfig


# Results go to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)

# Load config at module level to generate dynamic help text.
# A broken config file falls back to built-in defaults here; the command
# that loads it reports the error.
try:
    _default_cfg = ConfigLoader.load(None)
except ConfigError:
    _default_cfg = LogManagerConfig()
_has_config_file = ConfigLoader.find_config_file() is not None
_cfg_note = " via config" if _has_config_file else ""


def bool_show_default(value: bool, true_word: str, false_word: str) -> str:
    """Generate show_default string for boolean flags.

    Args:
        value: The boolean value to display
        true_word: Word to show when value is True (e.g., "recurse")
        false_word: Word to show when value is False (e.g., "no-recurse")

    Returns:
        String like "recurse via config" or "no-recurse"
    """
    return f"{true_word if value else false_word}{_cfg_note}"


def value_show_default(value: str) -> str:
    """Generate show_default string for a config-backed value."""
    return f"{value}{_cfg_note}"
