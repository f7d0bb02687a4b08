"""7-Zip lookup command for LogManager CLI."""

import typer

from logmanager.cli.helpers import configure_logging, handle_error, load_config
from logmanager.cli.options import ConfigOpt
from logmanager.core.errors import LogManagerError
from logmanager.core.sevenzip import SevenZipLocator


def register_sevenzip(app: typer.Typer) -> None:
    """Register the sevenzip command with the Typer app."""

    @app.command()
    def sevenzip(
        ctx: typer.Context,
        verify: bool = typer.Option(
            False, "--verify",
            help="Verify that the 7-Zip executable is working",
        ),
        required: bool = typer.Option(
            False, "--required",
            help="Fail if 7-Zip is not found (or fails verification)",
        ),
        config: ConfigOpt = None,
    ):
        """
        Print the path of the 7-Zip executable.

        Prints nothing when 7-Zip is not installed, unless --required is
        given, in which case the command fails with a distinct exit code for
        "not found" and "verification failed".

        Examples:
            logmanager sevenzip
            logmanager sevenzip --verify --required
        """
        cfg = load_config(config)
        configure_logging(ctx, cfg)

        locator = SevenZipLocator(
            extra_paths=cfg.sevenzip.extra_paths,
            which_timeout=cfg.sevenzip.which_timeout,
            verify_timeout=cfg.sevenzip.verify_timeout,
        )

        try:
            executable_path = locator.locate(verify=verify, required=required)
        except LogManagerError as e:
            handle_error(e)

        if executable_path:
            typer.echo(executable_path)
