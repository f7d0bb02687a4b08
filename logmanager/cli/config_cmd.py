"""Config commands for LogManager CLI."""

from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
import yaml

from logmanager.config import ConfigLoader
from logmanager.config.templates import get_config_template
from logmanager.cli._common import console
from logmanager.cli.helpers import error_exit, load_config


def create_config_app() -> typer.Typer:
    """Create and return the config sub-app with all commands registered."""

    config_app = typer.Typer(
        name="config",
        help="Configuration management commands.",
        no_args_is_help=True,
    )

    @config_app.command("init")
    def config_init(
        output: Path = typer.Option(
            Path("logmanager.yaml"),
            "--output", "-o",
            help="Output file path",
        ),
        full: bool = typer.Option(
            False,
            "--full",
            help="Generate full config with all options (default: minimal)",
        ),
        force: bool = typer.Option(
            False,
            "--force",
            help="Overwrite existing config file",
        ),
    ):
        """
        Initialize a new configuration file.

        Creates a logmanager.yaml file in the current directory (or specified path).
        Use --full to generate a complete config with all options documented.
        """
        output = output.resolve()

        if output.exists() and not force:
            console.print(f"[yellow]Config file already exists:[/yellow] {output}")
            console.print("Use --force to overwrite.")
            raise typer.Exit(1)

        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(get_config_template(full=full), encoding="utf-8")
        except OSError as e:
            error_exit(f"Cannot write config file: {e}")

        console.print(f"[green]Created config file:[/green] {output}")
        if full:
            console.print("[dim]Full configuration with all options documented.[/dim]")
        else:
            console.print("[dim]Minimal configuration. Edit to customize.[/dim]")

    @config_app.command("show")
    def config_show(
        config: Optional[Path] = typer.Option(
            None,
            "--config", "-c",
            help="Config file path (default: auto-detect)",
        ),
        section: Optional[str] = typer.Option(
            None,
            "--section", "-s",
            help="Show only specific section (e.g., 'general', 'sevenzip')",
        ),
    ):
        """
        Show current configuration.

        Displays the effective configuration from config file merged with defaults.
        """
        cfg = load_config(config)
        config_dict = asdict(cfg)

        if section:
            if section not in config_dict:
                console.print(f"[red]Unknown section:[/red] {section}")
                console.print(f"Available sections: {', '.join(config_dict.keys())}")
                raise typer.Exit(1)
            config_dict = {section: config_dict[section]}

        console.print("[bold]LogManager Configuration[/bold]")
        console.print()

        source = config or ConfigLoader.find_config_file()
        console.print(f"[dim]Source: {source if source else 'built-in defaults'}[/dim]")
        console.print()

        console.print(yaml.dump(config_dict, default_flow_style=False, sort_keys=False))

    @config_app.command("path")
    def config_path():
        """
        Show where LogManager looks for config files.
        """
        console.print("[bold]Config file search paths:[/bold]")
        console.print()

        active = ConfigLoader.find_config_file()
        for i, search_path in enumerate(ConfigLoader.DEFAULT_CONFIG_PATHS, 1):
            if search_path == active:
                status = "[green]ACTIVE[/green]"
            elif search_path.exists():
                status = "[yellow]exists (not used)[/yellow]"
            else:
                status = "[dim]not found[/dim]"
            console.print(f"  {i}. {search_path} {status}")

        if active is None:
            console.print()
            console.print("[dim]No config file found. Using built-in defaults.[/dim]")
            console.print("Run 'logmanager config init' to create one.")

    return config_app
