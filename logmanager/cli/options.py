"""Shared CLI option definitions."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

from logmanager.cli._common import _default_cfg, bool_show_default, value_show_default
from logmanager.core.models import DateType


class OutputFormat(str, Enum):
    """How matching entries are written to stdout."""

    PATH = "path"
    TABLE = "table"
    JSON = "json"


SearchPathArg = Annotated[Path, typer.Argument(help="Directory to search")]
OlderThanOpt = Annotated[
    Optional[int],
    typer.Option("--older-than", min=0, help="Only entries older than this many days"),
]
YoungerThanOpt = Annotated[
    Optional[int],
    typer.Option("--younger-than", min=0, help="Only entries younger than this many days"),
]
RecurseOpt = Annotated[
    Optional[bool],
    typer.Option(
        "--recurse/--no-recurse",
        help="Include subdirectories in the search",
        show_default=bool_show_default(_default_cfg.general.recursive, "recurse", "no-recurse"),
    ),
]
PatternOpt = Annotated[
    Optional[str],
    typer.Option(
        "--pattern",
        "-p",
        help="Name pattern, * and ? wildcards only (e.g. '*.log', '2024*')",
        show_default=value_show_default(_default_cfg.general.pattern),
    ),
]
DateTypeOpt = Annotated[
    Optional[DateType],
    typer.Option(
        "--date-type",
        "-d",
        help="Timestamp to filter files by",
        show_default=value_show_default(_default_cfg.files.date_type),
    ),
]
FormatOpt = Annotated[
    Optional[OutputFormat],
    typer.Option(
        "--format",
        "-f",
        help="Output format",
        show_default=value_show_default(_default_cfg.output.format),
    ),
]
ConfigOpt = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Config file path"),
]
