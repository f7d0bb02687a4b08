"""Main CLI application for LogManager.

This module serves as the orchestrator that registers all CLI commands.
Individual commands are implemented in separate modules for maintainability.
"""

import typer

from logmanager.cli._common import _default_cfg
from logmanager.cli.helpers import configure_logging

# Import command registration functions
from logmanager.cli.files_cmd import register_files
from logmanager.cli.folders_cmd import register_folders
from logmanager.cli.sevenzip_cmd import register_sevenzip
from logmanager.cli.version_cmd import register_version
from logmanager.cli.config_cmd import create_config_app


# Create main app
app = typer.Typer(
    name="logmanager",
    help="LogManager - find files and folders by age, locate 7-Zip.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """LogManager - find files and folders by age, locate 7-Zip."""
    ctx.obj = {"verbose": verbose}
    # Commands that take --config reapply logging from the loaded file
    configure_logging(ctx, _default_cfg)


# Register top-level commands
register_files(app)
register_folders(app)
register_sevenzip(app)
register_version(app)

# Add sub-apps
app.add_typer(create_config_app(), name="config")


if __name__ == "__main__":
    app()
