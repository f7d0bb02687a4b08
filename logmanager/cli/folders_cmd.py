"""Folders command for LogManager CLI."""

import typer

from logmanager.cli._common import console, err_console
from logmanager.cli.helpers import (
    configure_logging,
    handle_error,
    load_config,
    render_entries,
    resolve_bool,
    resolve_value,
    stop_on_interrupt,
)
from logmanager.cli.options import (
    ConfigOpt,
    FormatOpt,
    OlderThanOpt,
    OutputFormat,
    PatternOpt,
    RecurseOpt,
    SearchPathArg,
    YoungerThanOpt,
)
from logmanager.core.errors import LogManagerError
from logmanager.core.folder_filter import filter_folders


def register_folders(app: typer.Typer) -> None:
    """Register the folders command with the Typer app."""

    @app.command()
    def folders(
        ctx: typer.Context,
        path: SearchPathArg,
        older_than: OlderThanOpt = None,
        younger_than: YoungerThanOpt = None,
        recurse: RecurseOpt = None,
        pattern: PatternOpt = None,
        output_format: FormatOpt = None,
        config: ConfigOpt = None,
    ):
        """
        List folders whose name starts with a date inside a day window.

        Folder names must start with YYYYMMDD or YYYY-MM-DD (anything after
        the date is ignored, e.g. 20240101_backup). Folders without a valid
        date are skipped.

        Examples:
            logmanager folders /backups --older-than 90
            logmanager folders /archive --pattern "2024*" --younger-than 30
        """
        cfg = load_config(config)
        configure_logging(ctx, cfg)

        use_recurse = resolve_bool(recurse, cfg.general.recursive)
        use_pattern = resolve_value(pattern, cfg.general.pattern)
        use_format = resolve_value(output_format, OutputFormat(cfg.output.format))

        with stop_on_interrupt() as stop_event:
            try:
                entries = filter_folders(
                    path,
                    older_than=older_than,
                    younger_than=younger_than,
                    recurse=use_recurse,
                    pattern=use_pattern,
                    ignore_hidden=cfg.general.ignore_hidden_files,
                    stop_event=stop_event,
                )
                render_entries(entries, use_format, console, title="Folders")
            except LogManagerError as e:
                handle_error(e)

            if stop_event.is_set():
                err_console.print("[yellow]Stopped by user.[/yellow]")
