"""Version command for LogManager CLI."""

import typer

from logmanager import __version__
from logmanager.cli._common import console


def register_version(app: typer.Typer) -> None:
    """Register the version command with the Typer app."""

    @app.command()
    def version():
        """Show LogManager version."""
        console.print(f"LogManager v{__version__}")
