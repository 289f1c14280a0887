"""Init command for creating luman.toml configuration."""

import click

from luman_cli.cli.output import user_output
from luman_cli.context import LumanContext
from luman_cli.error_boundary import cli_error_boundary
from luman_cli.io.config import create_default_config, get_config_path, save_project_config
from luman_cli.io.manifest import get_manifest_path, initialize_manifest, manifest_exists


@click.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing luman.toml if present",
)
@click.option(
    "--src-dir/--no-src-dir",
    default=None,
    help="Place components under src/ (detected from the project by default)",
)
@click.option("--registry-url", default=None, help="Registry to record in luman.toml")
@click.pass_obj
@cli_error_boundary
def init(ctx: LumanContext, force: bool, src_dir: bool | None, registry_url: str | None) -> None:
    """Initialize luman.toml configuration file.

    What gets created:
    - luman.toml: Registry location and target directories for components
    - .luman/manifest.json: Record of installed components (if missing)

    Use --force to overwrite an existing configuration. An existing manifest
    is never reset.
    """
    project_dir = ctx.project_dir
    config_path = get_config_path(project_dir)

    if config_path.exists() and not force:
        user_output("Error: luman.toml already exists")
        user_output("Use --force to overwrite")
        raise SystemExit(1)

    use_src = src_dir if src_dir is not None else (project_dir / "src").is_dir()
    config = create_default_config(src_dir=use_src)
    if registry_url is not None:
        config = config.with_registry(registry_url)

    save_project_config(project_dir, config)
    user_output(f"Created {config_path}")

    if not manifest_exists(project_dir):
        initialize_manifest(project_dir)
        user_output(f"Created {get_manifest_path(project_dir)}")

    user_output("\nYou can now add components using:")
    user_output("  luman add <component>")
