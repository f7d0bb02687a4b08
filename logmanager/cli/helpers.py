"""CLI helper functions for LogManager.

This module provides shared utilities to reduce code duplication across CLI commands.
"""

import json
import signal
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, NoReturn, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from logmanager.cli._common import err_console
from logmanager.cli.options import OutputFormat
from logmanager.config import ConfigError, ConfigLoader, LogManagerConfig
from logmanager.core.errors import LogManagerError
from logmanager.core.models import DatedEntry
from logmanager.utils.constants import EXIT_CONFIG_ERROR
from logmanager.utils.logging import setup_logging

T = TypeVar("T")


def load_config(config_path: Optional[Path]) -> LogManagerConfig:
    """Load and validate configuration, exiting on errors.

    Args:
        config_path: Explicit config file, or None to auto-detect

    Returns:
        Loaded configuration

    Raises:
        typer.Exit: If the config cannot be loaded or is invalid
    """
    try:
        cfg = ConfigLoader.load(config_path)
    except ConfigError as e:
        error_exit(str(e), EXIT_CONFIG_ERROR)

    errors = ConfigLoader.validate(cfg)
    if errors:
        for message in errors:
            err_console.print(f"[red]Config error:[/red] {message}")
        raise typer.Exit(EXIT_CONFIG_ERROR)

    return cfg


def configure_logging(ctx: typer.Context, cfg: LogManagerConfig) -> None:
    """Set up logging from a config's logging section.

    --verbose (stored on the root context) forces DEBUG regardless of the
    configured level.
    """
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    log_cfg = cfg.logging
    setup_logging(
        level="DEBUG" if verbose else log_cfg.level,
        log_file=Path(log_cfg.file_path) if log_cfg.file_path else None,
        use_colors=log_cfg.color_output,
    )


def error_exit(message: str, code: int = 1) -> NoReturn:
    """Print an error message to stderr and exit.

    Args:
        message: Error message to display
        code: Exit code (default: 1)

    Raises:
        typer.Exit: Always raises with the given code
    """
    err_console.print(f"[red]Error:[/red] {message}", highlight=False)
    raise typer.Exit(code)


def handle_error(error: LogManagerError) -> NoReturn:
    """Report a fatal LogManager error and exit with its exit code."""
    error_exit(f"{error.message} ({error.error_id})", error.exit_code)


def resolve_bool(cli_value: Optional[bool], config_value: bool) -> bool:
    """Resolve boolean value: CLI overrides config if explicitly set.

    Args:
        cli_value: Value from CLI (None if not provided)
        config_value: Default value from config

    Returns:
        CLI value if provided, otherwise config value
    """
    return config_value if cli_value is None else cli_value


def resolve_value(cli_value: Optional[T], config_value: T) -> T:
    """Resolve any option value: CLI overrides config if explicitly set."""
    return config_value if cli_value is None else cli_value


@contextmanager
def stop_on_interrupt() -> Iterator[threading.Event]:
    """Turn Ctrl-C into a stop signal for the duration of the block.

    The first SIGINT sets the yielded event so a running enumeration can
    end after the current entry. The previous handler is restored on exit.
    """
    stop_event = threading.Event()

    def _request_stop(signum, frame):
        stop_event.set()

    try:
        previous = signal.signal(signal.SIGINT, _request_stop)
    except ValueError:
        # Not in the main thread; signals cannot be installed
        yield stop_event
        return

    try:
        yield stop_event
    finally:
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)


def render_entries(
    entries: Iterable[DatedEntry],
    output_format: OutputFormat,
    console: Console,
    title: str,
) -> int:
    """Write matching entries to stdout in the requested format.

    ``path`` output is streamed one line per entry as the enumeration
    produces it; ``table`` and ``json`` collect the results first.

    Args:
        entries: Entries to write
        output_format: path, table or json
        console: Rich console used for table output
        title: Table title (entries noun, e.g. "Files")

    Returns:
        Number of entries written
    """
    if output_format == OutputFormat.PATH:
        count = 0
        for entry in entries:
            typer.echo(str(entry.path))
            count += 1
        return count

    collected = list(entries)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps([entry.to_dict() for entry in collected], indent=2))
        return len(collected)

    table = Table(title=f"{title} ({len(collected)})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Date", style="white", no_wrap=True)
    table.add_column("Path", style="dim", overflow="fold")
    for entry in collected:
        table.add_row(entry.name, entry.date.isoformat(), str(entry.path))
    console.print(table)
    return len(collected)
