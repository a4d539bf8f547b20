"""Identity commands: who, list, add, rm and switching."""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from . import console
from ..errors import GitConfigError, IdentityNotFoundError
from ..identities import IdentityStore, Store
from ..switch import plan_switch, switch

ADD_USAGE = 'Usage: gitu add <name> "Full Name" you@company.com [~/.ssh/key]'
RM_USAGE = "Usage: gitu rm <name>"
ADD_HINT = 'Add one with: gitu add work "John" john@company.com'


def _save(identity_store: IdentityStore, store: Store) -> None:
    try:
        identity_store.save(store)
    except OSError as e:
        console.print(f"[red]Error saving identities:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"[dim]Saved → {escape(str(identity_store.path))}[/dim]")


def who(ctx: typer.Context) -> None:
    """Show the current identity."""
    store = ctx.obj.identity_store.load()
    active = store.active()

    if active is None:
        console.print("[yellow]No identity set.[/yellow] Use: gitu <name>")
        return

    identity_id, identity = active
    console.print(
        f"Current: [cyan]{escape(identity_id)}[/cyan] → "
        f"{escape(identity.display_name)} <{escape(identity.email)}>",
        highlight=False,
    )


def list_identities(ctx: typer.Context) -> None:
    """List all identities."""
    store = ctx.obj.identity_store.load()
    entries = store.entries()

    if not entries:
        console.print("[yellow]No identities yet.[/yellow] Add one with: gitu add ...")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Full name")
    table.add_column("Email")
    table.add_column("SSH key")
    table.add_column("Status")

    for entry in entries:
        identity = entry.identity
        status = "[green]● active[/green]" if entry.is_current else ""
        table.add_row(
            escape(entry.identity_id),
            escape(identity.display_name),
            escape(identity.email),
            escape(identity.ssh_key_path) if identity.ssh_key_path else "[dim]-[/dim]",
            status,
        )

    console.print(table)


def add(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Identity name, e.g. work"),
    full_name: Optional[str] = typer.Argument(None, help="git user.name"),
    email: Optional[str] = typer.Argument(None, help="git user.email"),
    ssh_key: Optional[str] = typer.Argument(None, help="SSH private key path"),
) -> None:
    """Add or replace an identity."""
    if not name or not full_name or not email:
        console.print(escape(ADD_USAGE), highlight=False)
        raise typer.Exit(1)

    identity_store = ctx.obj.identity_store
    store = identity_store.load().add(name, full_name, email, ssh_key)
    _save(identity_store, store)

    console.print(
        f"[green]✓[/green] Added identity: [cyan]{escape(name)}[/cyan] → {escape(email)}"
    )


def remove(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Identity name to remove"),
) -> None:
    """Remove an identity."""
    if not name:
        console.print(RM_USAGE, highlight=False)
        raise typer.Exit(1)

    identity_store = ctx.obj.identity_store
    try:
        store = identity_store.load().remove(name)
    except IdentityNotFoundError as e:
        console.print(f"[red]Error:[/red] Identity '{escape(e.identity_id)}' not found.")
        raise typer.Exit(1)

    _save(identity_store, store)
    console.print(f"[green]✓[/green] Removed identity: [cyan]{escape(name)}[/cyan]")
    if store.current is None:
        console.print("[dim]No identity is current now. Switch with: gitu <name>[/dim]")


def _report_not_found(error: IdentityNotFoundError) -> None:
    console.print(f"[red]Error:[/red] Identity '{escape(error.identity_id)}' not found.")
    if error.available:
        console.print("Available:")
        for identity_id in error.available:
            console.print(f"  • {escape(identity_id)}")
    console.print(f"\n[dim]{escape(ADD_HINT)}[/dim]")


def use(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Identity to switch to"),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the git config commands without running them"
    ),
) -> None:
    """Switch to an identity (same as `gitu <name>`).

    Options go after the name: `gitu work --dry-run`. Ids starting with `-`
    need `--`: `gitu use -- -x`.
    """
    state = ctx.obj
    settings = state.settings
    identity_store = state.identity_store
    store = identity_store.load()

    try:
        if dry_run:
            plan = plan_switch(store, name, ssh_executable=settings.ssh_executable)
        else:
            store, plan = switch(
                store, name, state.git, ssh_executable=settings.ssh_executable
            )
    except IdentityNotFoundError as e:
        _report_not_found(e)
        raise typer.Exit(1)
    except GitConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if dry_run:
        console.print(f"[yellow]Dry run[/yellow] ({settings.scope.value} scope):")
        for directive in plan.directives:
            console.print(directive.display(), markup=False, highlight=False, soft_wrap=True)
        return

    _save(identity_store, store)
    identity = store.identities[name]
    console.print(
        f"[green]✓[/green] Switched to [cyan]{escape(name)}[/cyan] → {escape(identity.email)}"
    )
