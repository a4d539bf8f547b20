"""Top-level options and settings commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from . import console
from .. import __version__
from ..config.loader import default_settings_paths, find_settings_file, load_settings, save_settings
from ..config.schema import GituSettings
from ..identities import IdentityStore
from ..log import configure_logging
from ..switch import GitConfig


class CliContext:
    """Settings and collaborators shared by the commands of one invocation."""

    def __init__(self, settings: GituSettings, settings_file: Path | None = None):
        self.settings = settings
        self.settings_file = settings_file

    @property
    def identity_store(self) -> IdentityStore:
        return IdentityStore(self.settings.store_path)

    @property
    def git(self) -> GitConfig:
        return GitConfig(self.settings.scope, self.settings.git_executable)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"gitu v{__version__}", highlight=False)
        raise typer.Exit()


def root(
    ctx: typer.Context,
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to settings file"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
) -> None:
    """Dead simple git identity switcher.

    Run `gitu <name>` to switch to an identity.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        settings = load_settings(config_file)
    except Exception as e:
        console.print(f"[red]Error loading settings:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    configure_logging(settings.log_level)
    ctx.obj = CliContext(settings, config_file or find_settings_file())


def config(
    ctx: typer.Context,
    init: bool = typer.Option(False, "--init", help="Write a settings file with defaults"),
) -> None:
    """Show the effective settings."""
    state: CliContext = ctx.obj

    if init:
        settings_file = state.settings_file or default_settings_paths()[0]
        if settings_file.exists():
            overwrite = typer.confirm(
                f"Settings file already exists at {settings_file}. Overwrite?"
            )
            if not overwrite:
                raise typer.Exit(0)

        try:
            save_settings(GituSettings(), settings_file)
        except OSError as e:
            console.print(f"[red]Error saving settings:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] Created settings file at: {escape(str(settings_file))}")
        return

    settings = state.settings
    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Store", escape(str(settings.resolved_store_path)))
    table.add_row("Scope", settings.scope.value)
    table.add_row("git", escape(settings.git_executable))
    table.add_row("ssh", escape(settings.ssh_executable))
    table.add_row("Log level", settings.log_level)
    table.add_row(
        "Settings file",
        escape(str(state.settings_file)) if state.settings_file else "[dim]none[/dim]",
    )

    console.print(table)
