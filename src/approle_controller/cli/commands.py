"""
AppRole Controller CLI Commands.

Provides a CLI for reconciling AppRole roles declared in YAML files against
Vault. Connection settings fall back to the standard Vault environment
variables (VAULT_ADDR, VAULT_TOKEN, VAULT_NAMESPACE).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from approle_controller.cli.loader_role_declaration import load_role_declaration
from approle_controller.controllers import ControllerAppRoleRole
from approle_controller.errors import RoleControllerError
from approle_controller.handlers import HandlerVaultLogical
from approle_controller.models import ModelRoleConfig
from approle_controller.projectors import IDENTITY_FIELDS
from approle_controller.protocols import ProtocolVaultLogicalClient

console = Console()


@click.group()
@click.option("--vault-addr", envvar="VAULT_ADDR", default=None, help="Vault server URL")
@click.option(
    "--vault-token",
    envvar="VAULT_TOKEN",
    default=None,
    help="Vault token (prefer the VAULT_TOKEN environment variable)",
)
@click.option(
    "--vault-namespace",
    envvar="VAULT_NAMESPACE",
    default=None,
    help="Vault Enterprise namespace",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(
    ctx: click.Context,
    vault_addr: str | None,
    vault_token: str | None,
    vault_namespace: str | None,
    log_level: str,
) -> None:
    """Reconcile Vault AppRole auth backend roles."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj.setdefault("vault_addr", vault_addr)
    ctx.obj.setdefault("vault_token", vault_token)
    ctx.obj.setdefault("vault_namespace", vault_namespace)


def _client(ctx: click.Context) -> ProtocolVaultLogicalClient:
    """Return the Vault client, building it from the group options once."""
    client: ProtocolVaultLogicalClient | None = ctx.obj.get("client")
    if client is not None:
        return client
    if not ctx.obj.get("vault_addr"):
        raise click.UsageError("Vault address required (--vault-addr or VAULT_ADDR)")
    try:
        client = HandlerVaultLogical.from_config(
            {
                "url": ctx.obj["vault_addr"],
                "token": ctx.obj.get("vault_token"),
                "namespace": ctx.obj.get("vault_namespace"),
            }
        )
    except RoleControllerError as e:
        _fail(e)
    ctx.obj["client"] = client
    return client


def _fail(error: RoleControllerError) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    raise SystemExit(1) from error


def _format_value(value: object) -> str:
    if isinstance(value, (set, frozenset)):
        return ", ".join(sorted(value))
    if value is None:
        return "-"
    return str(value)


def _print_role(config: ModelRoleConfig) -> None:
    """Print a role configuration as a two-column table."""
    table = Table(title=config.identity.path)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in config.model_dump().items():
        table.add_row(name, escape(_format_value(value)))
    console.print(table)


@cli.command("create")
@click.argument("declaration", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def create_cmd(ctx: click.Context, declaration: Path) -> None:
    """Create (or overwrite) the role declared in DECLARATION."""
    controller = ControllerAppRoleRole(_client(ctx))
    try:
        config = load_role_declaration(declaration)
        identity = controller.create(config)
    except RoleControllerError as e:
        _fail(e)
    console.print(f"[bold green]Created[/bold green] {identity.path}")
    if controller.config is not None:
        _print_role(controller.config)


@cli.command("read")
@click.argument("path")
@click.pass_context
def read_cmd(ctx: click.Context, path: str) -> None:
    """Show the role stored at PATH."""
    controller = ControllerAppRoleRole(_client(ctx), resource_id=path)
    try:
        config = controller.read()
    except RoleControllerError as e:
        _fail(e)
    if config is None:
        console.print(f"[yellow]No role found at[/yellow] {path}")
        raise SystemExit(1)
    _print_role(config)


@cli.command("update")
@click.argument("declaration", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def update_cmd(ctx: click.Context, declaration: Path) -> None:
    """Write only the fields present in DECLARATION to an existing role."""
    try:
        declared = load_role_declaration(declaration)
        path = declared.identity.path
        controller = ControllerAppRoleRole(_client(ctx), resource_id=path)
        current = controller.read()
        if current is None:
            console.print(f"[yellow]No role found at[/yellow] {path}")
            raise SystemExit(1)
        changed = set(declared.model_fields_set) - IDENTITY_FIELDS
        desired = current.model_copy(
            update={name: getattr(declared, name) for name in changed}
        )
        config = controller.update(desired, changed_fields=changed)
    except RoleControllerError as e:
        _fail(e)
    if config is None:
        console.print(f"[yellow]Role disappeared during update:[/yellow] {path}")
        raise SystemExit(1)
    console.print(
        f"[bold green]Updated[/bold green] {path} ({', '.join(sorted(changed)) or 'no fields'})"
    )
    _print_role(config)


@cli.command("delete")
@click.argument("path")
@click.pass_context
def delete_cmd(ctx: click.Context, path: str) -> None:
    """Delete the role at PATH. Deleting a missing role succeeds."""
    controller = ControllerAppRoleRole(_client(ctx), resource_id=path)
    try:
        controller.delete()
    except RoleControllerError as e:
        _fail(e)
    console.print(f"[bold green]Deleted[/bold green] {path}")


@cli.command("exists")
@click.argument("path")
@click.pass_context
def exists_cmd(ctx: click.Context, path: str) -> None:
    """Exit 0 if a role exists at PATH, 1 otherwise."""
    controller = ControllerAppRoleRole(_client(ctx))
    try:
        found = controller.exists(path)
    except RoleControllerError as e:
        _fail(e)
    console.print("true" if found else "false")
    raise SystemExit(0 if found else 1)


@cli.command("import")
@click.argument("path")
@click.pass_context
def import_cmd(ctx: click.Context, path: str) -> None:
    """Adopt the existing role at PATH and show its configuration."""
    controller = ControllerAppRoleRole(_client(ctx))
    try:
        identity = controller.import_role(path)
    except RoleControllerError as e:
        _fail(e)
    console.print(
        f"[bold green]Imported[/bold green] {identity.role_name} "
        f"from mount {identity.mount}"
    )
    if controller.config is not None:
        _print_role(controller.config)


if __name__ == "__main__":
    cli()
