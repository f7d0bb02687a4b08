"""Files command for LogManager CLI."""

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
    DateTypeOpt,
    FormatOpt,
    OlderThanOpt,
    OutputFormat,
    PatternOpt,
    RecurseOpt,
    SearchPathArg,
    YoungerThanOpt,
)
from logmanager.core.errors import LogManagerError
from logmanager.core.file_filter import filter_files
from logmanager.core.models import DateType


def register_files(app: typer.Typer) -> None:
    """Register the files command with the Typer app."""

    @app.command()
    def files(
        ctx: typer.Context,
        path: SearchPathArg,
        date_type: DateTypeOpt = None,
        older_than: OlderThanOpt = None,
        younger_than: YoungerThanOpt = None,
        recurse: RecurseOpt = None,
        pattern: PatternOpt = None,
        output_format: FormatOpt = None,
        config: ConfigOpt = None,
    ):
        """
        List files whose creation or modification date falls in a day window.

        Both bounds are exclusive: --older-than 7 excludes files dated exactly
        7 days ago. Dates are compared as whole days.

        Examples:
            logmanager files /var/log --older-than 30 --pattern "*.log"
            logmanager files ./data --date-type modified --younger-than 7 --recurse
        """
        cfg = load_config(config)
        configure_logging(ctx, cfg)

        use_date_type = resolve_value(date_type, DateType(cfg.files.date_type))
        use_recurse = resolve_bool(recurse, cfg.general.recursive)
        use_pattern = resolve_value(pattern, cfg.general.pattern)
        use_format = resolve_value(output_format, OutputFormat(cfg.output.format))

        with stop_on_interrupt() as stop_event:
            try:
                entries = filter_files(
                    path,
                    date_type=use_date_type,
                    older_than=older_than,
                    younger_than=younger_than,
                    recurse=use_recurse,
                    pattern=use_pattern,
                    ignore_hidden=cfg.general.ignore_hidden_files,
                    stop_event=stop_event,
                )
                render_entries(entries, use_format, console, title="Files")
            except LogManagerError as e:
                handle_error(e)

            if stop_event.is_set():
                err_console.print("[yellow]Stopped by user.[/yellow]")
