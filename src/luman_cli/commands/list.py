"""List command for showing the components a registry publishes."""

import click
from rich.console import Console
from rich.table import Table

from luman_cli.cli.output import user_output
from luman_cli.context import LumanContext
from luman_cli.error_boundary import cli_error_boundary


@click.command(name="list")
@click.pass_obj
@cli_error_boundary
def list_components(ctx: LumanContext) -> None:
    """List all components available in the registry."""
    items = sorted(ctx.registry.list_items(), key=lambda item: item.name)

    if not items:
        user_output("Registry has no components")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("component", style="cyan", no_wrap=True)
    table.add_column("type", no_wrap=True)
    table.add_column("version", no_wrap=True)
    table.add_column("description")

    for item in items:
        table.add_row(item.name, item.type, item.version, item.description or "")

    console = Console(stderr=True)
    console.print(table)
    console.print(f"Total: {len(items)} component(s)", style="dim")
