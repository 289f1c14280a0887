"""Bump command for publishing a new version of a registry item."""

from pathlib import Path

import click

from luman_cli.cli.output import user_output
from luman_cli.error_boundary import cli_error_boundary
from luman_cli.models.semver import validate_bump_type
from luman_cli.operations.bump import bump_registry_item

DEFAULT_REGISTRY_DIR = Path("packages") / "ui" / "src" / "registry"


@click.command()
@click.argument("component")
@click.option(
    "--type",
    "bump_type",
    type=click.Choice(["major", "minor", "patch"]),
    required=True,
    help="Version bump type",
)
@click.option(
    "--change",
    "-m",
    "changes",
    multiple=True,
    required=True,
    help="Changelog line (repeatable)",
)
@click.option(
    "--registry-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"Local registry directory (default: ./{DEFAULT_REGISTRY_DIR.as_posix()})",
)
@cli_error_boundary
def bump(
    component: str, bump_type: str, changes: tuple[str, ...], registry_dir: Path | None
) -> None:
    """Bump version, content hash and changelog of a registry component.

    Examples:

        luman registry bump button --type minor -m "Added ghost variant"
    """
    resolved_dir = registry_dir if registry_dir is not None else Path.cwd() / DEFAULT_REGISTRY_DIR

    result = bump_registry_item(
        resolved_dir, component, validate_bump_type(bump_type), list(changes)
    )

    user_output(f"✓ Bumped {result.component}: {result.old_version} → {result.new_version}")
    user_output(f"  Hash: {result.content_hash[:12]}...")
    user_output(f"  Changelog entries: {result.changelog_entries}")
