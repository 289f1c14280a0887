"""Add command for installing components from the registry."""

import click

from luman_cli.cli.output import user_output
from luman_cli.context import LumanContext
from luman_cli.error_boundary import cli_error_boundary
from luman_cli.io.config import require_project_config
from luman_cli.operations.install import install_components


@click.command()
@click.argument("components", nargs=-1)
@click.option("--all", "install_all", is_flag=True, help="Install every component in the registry")
@click.pass_obj
@cli_error_boundary
def add(ctx: LumanContext, components: tuple[str, ...], install_all: bool) -> None:
    """Add one or more components and their registry dependencies.

    Examples:

        # Add a single component
        luman add button

        # Add several components
        luman add button card dialog

        # Add everything the registry publishes
        luman add --all
    """
    config = require_project_config(ctx.project_dir)

    names = list(components)
    if install_all or "all" in names:
        names = [item.name for item in ctx.registry.list_items()]

    if not names:
        user_output("No components to install")
        user_output("Usage: luman add <component>...")
        raise SystemExit(1)

    result = install_components(ctx.project_dir, names, ctx.registry, config)

    for name in result.not_found:
        user_output(click.style(f"⚠ Component '{name}' not found in registry", fg="yellow"))

    if not result.installed:
        user_output(click.style("No components were installed", fg="red"))
        raise SystemExit(1)

    user_output(click.style(f"✓ Installed {len(result.installed)} component(s)", fg="green"))
    for name in result.installed:
        user_output(f"  • {name}")

    user_output("\nFiles written:")
    for path in result.files_written:
        user_output(f"  {path}")

    if result.dependencies or result.dev_dependencies:
        user_output("\nInstall these packages with your package manager:")
        for package in result.dependencies:
            user_output(f"  {package}")
        for package in result.dev_dependencies:
            user_output(f"  {package} (dev)")
