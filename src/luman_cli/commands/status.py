"""Status command for checking installed components against manifest and registry."""

import click

from luman_cli.cli.output import user_output
from luman_cli.context import LumanContext
from luman_cli.error_boundary import cli_error_boundary
from luman_cli.models.status import Customized, Outdated, StatusResult, Unchanged
from luman_cli.operations.status import check_all_components_status, check_component_status


@click.command()
@click.argument("component", required=False)
@click.option("--offline", is_flag=True, help="Skip the registry check for newer versions")
@click.pass_obj
@cli_error_boundary
def status(ctx: LumanContext, component: str | None, offline: bool) -> None:
    """Check status of installed components.

    Each component is reported as unchanged, customized (local edits or
    deleted files), outdated (registry has another version) or untracked (not
    installed with luman). Deleted files are listed separately.
    """
    registry = None if offline else ctx.registry

    if component is not None:
        results = [check_component_status(ctx.project_dir, component, registry)]
    else:
        results = check_all_components_status(ctx.project_dir, registry)

    if not results:
        user_output("No components installed")
        user_output("Run `luman add <component>` to install components")
        return

    _render(results)


def _render(results: list[StatusResult]) -> None:
    unchanged = [r for r in results if isinstance(r.status, Unchanged)]
    customized = [r for r in results if isinstance(r.status, Customized)]
    outdated = [r for r in results if isinstance(r.status, Outdated)]
    missing = [r for r in results if r.missing_files]
    untracked = [r for r in results if r.state == "untracked"]

    if unchanged:
        user_output(click.style(f"{len(unchanged)} component(s) up to date", fg="green"))
        for r in unchanged:
            if isinstance(r.status, Unchanged):
                user_output(f"  ✓ {r.component}@{r.status.version}")

    if customized:
        user_output(click.style(f"{len(customized)} component(s) customized", fg="yellow"))
        for r in customized:
            if isinstance(r.status, Customized):
                user_output(f"  ⚠ {r.component}@{r.status.version} (modified)")
        user_output(click.style("  These components have local modifications.", dim=True))

    if outdated:
        header = f"{len(outdated)} component(s) have updates available"
        user_output(click.style(header, fg="blue"))
        for r in outdated:
            if isinstance(r.status, Outdated):
                user_output(
                    f"  ↑ {r.component}: {r.status.installed_version} → {r.status.latest_version}"
                )
        user_output(click.style("  Run `luman update <component>` to update", dim=True))

    if missing:
        user_output(click.style(f"{len(missing)} component(s) have missing files", fg="red"))
        for r in missing:
            label = " (all files)" if len(r.missing_files) == len(r.files) else ""
            user_output(f"  ✗ {r.component}: {len(r.missing_files)} file(s) missing{label}")
            for f in r.missing_files:
                user_output(f"    • {f.path}")
        user_output(click.style("  Run `luman add <component>` to reinstall", dim=True))

    if untracked:
        user_output(click.style(f"{len(untracked)} component(s) not tracked", fg="yellow"))
        for r in untracked:
            user_output(f"  ? {r.component}")
