"""Update command for bringing installed components to the latest version."""

import click

from luman_cli.cli.output import user_output
from luman_cli.commands.diff import colorize_diff
from luman_cli.context import LumanContext
from luman_cli.error_boundary import cli_error_boundary
from luman_cli.io.config import require_project_config
from luman_cli.models.status import Outdated
from luman_cli.operations.diff import generate_diff
from luman_cli.operations.status import check_component_status
from luman_cli.operations.update import fetch_update_candidate, is_breaking_change, update_component


@click.command()
@click.argument("component")
@click.option("--force", "-f", is_flag=True, help="Overwrite local customizations")
@click.option(
    "--backup/--no-backup",
    default=True,
    help="Keep a .backup copy of every overwritten file (default: on)",
)
@click.option("--show-diff", is_flag=True, help="Print the diff before updating")
@click.pass_obj
@cli_error_boundary
def update(
    ctx: LumanContext, component: str, force: bool, backup: bool, show_diff: bool
) -> None:
    """Update an installed component to the registry's latest version.

    Customized components are left alone unless --force is given; the diff is
    always printed before customizations are overwritten.

    Examples:

        # Update a pristine component
        luman update button

        # Overwrite local edits, keeping .backup copies
        luman update button --force
    """
    config = require_project_config(ctx.project_dir)
    status = check_component_status(ctx.project_dir, component, ctx.registry)

    if status.state == "untracked":
        user_output(f"Error: Component '{component}' is not installed")
        user_output(f"Run `luman add {component}` to install it")
        raise SystemExit(1)

    if status.state == "unchanged" and not force:
        user_output(f"✓ {component} is already up to date")
        return

    if status.state == "customized":
        user_output(click.style(f"⚠ {component} has been customized", fg="yellow"))
        for f in status.modified_files:
            user_output(f"    • {f.path}")
        if not force:
            user_output("Use --force to overwrite your changes")
            raise SystemExit(1)

    candidate = fetch_update_candidate(ctx.registry, component)

    breaking = False
    if isinstance(status.status, Outdated):
        user_output(
            f"Current: {status.status.installed_version} → Latest: {status.status.latest_version}"
        )
        release = candidate.changelog_for(status.status.latest_version)
        if release is not None:
            breaking = is_breaking_change(release)
            if breaking:
                user_output(click.style("⚠ BREAKING CHANGES", fg="red", bold=True))
            user_output(f"\nChanges in v{release.version}:")
            for change in release.changes:
                user_output(f"  • {change}")
            user_output("")

    if show_diff or breaking or status.state == "customized":
        diff_text = generate_diff(ctx.project_dir, component, candidate, config)
        user_output(colorize_diff(diff_text))
        user_output("")

    result = update_component(
        ctx.project_dir,
        component,
        ctx.registry,
        config,
        force=force,
        backup=backup,
        status=status,
        candidate=candidate,
    )

    if not result.was_updated:
        user_output(f"No changes made to {component}")
        return

    user_output(
        click.style(
            f"✓ Updated {component}: {result.old_version} → {result.new_version}", fg="green"
        )
    )
    user_output(f"  Files written: {len(result.files_written)}")
    if result.files_removed:
        user_output(f"  Files removed: {len(result.files_removed)}")
    if result.backups:
        user_output("  Original files backed up with .backup extension")
    if result.new_dependencies:
        user_output(f"  Installed new dependencies: {', '.join(result.new_dependencies)}")
