"""Remove command for uninstalling components."""

import click

from luman_cli.cli.output import user_output
from luman_cli.context import LumanContext
from luman_cli.error_boundary import cli_error_boundary
from luman_cli.operations.remove import remove_installed_component


@click.command()
@click.argument("component")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_obj
@cli_error_boundary
def remove(ctx: LumanContext, component: str, yes: bool) -> None:
    """Remove an installed component.

    Deletes the files recorded for the component and drops it from the
    manifest. npm dependencies are not uninstalled.

    Examples:

        # Remove a component
        luman remove button
    """
    if not yes:
        click.confirm(f"Are you sure you want to remove {component}?", abort=True, err=True)

    result = remove_installed_component(ctx.project_dir, component)

    user_output(f"✓ Removed {result.component} v{result.version}")
    user_output(f"  Deleted {len(result.deleted)} file(s)")
    for path in result.deleted:
        user_output(f"    {path}")

    if result.already_missing:
        user_output(f"  Note: {len(result.already_missing)} file(s) were already removed")
