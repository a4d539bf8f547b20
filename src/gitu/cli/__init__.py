"""CLI entry point for gitu."""

import typer
from rich.console import Console
from typer.core import TyperGroup

# Shared console instance
console = Console()

SWITCH_COMMAND = "use"


class IdentityGroup(TyperGroup):
    """Command group where an unknown command name is an identity to switch to.

    ``gitu work`` runs ``gitu use work``. Identities whose id collides with a
    command name are reachable through ``use``.
    """

    def resolve_command(self, ctx, args):
        if args and args[0] not in self.commands and not args[0].startswith("-"):
            args = [SWITCH_COMMAND, *args]
        return super().resolve_command(ctx, args)


# Create main app
app = typer.Typer(
    name="gitu",
    cls=IdentityGroup,
    help="Dead simple git identity switcher",
    add_completion=False,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


# Import and register command modules
from . import identity, main

app.callback(invoke_without_command=True)(main.root)

# Register main commands
app.command("who")(identity.who)
app.command("list")(identity.list_identities)
app.command("add")(identity.add)
app.command("rm")(identity.remove)
app.command("remove", hidden=True)(identity.remove)
app.command(SWITCH_COMMAND)(identity.use)
app.command("config")(main.config)


def cli_main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    cli_main()
