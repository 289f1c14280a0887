"""Diff command for previewing what an update would change."""

import click

from luman_cli.cli.output import machine_output
from luman_cli.context import LumanContext
from luman_cli.error_boundary import cli_error_boundary
from luman_cli.io.config import require_project_config
from luman_cli.operations.diff import NO_CHANGES, generate_diff
from luman_cli.operations.update import fetch_update_candidate


def colorize_diff(diff_text: str) -> str:
    """Color added lines green and removed lines red, leaving headers bold."""
    if diff_text == NO_CHANGES:
        return diff_text

    lines: list[str] = []
    for line in diff_text.splitlines():
        if line.startswith(("---", "+++")):
            lines.append(click.style(line, bold=True))
        elif line.startswith("@@"):
            lines.append(click.style(line, fg="cyan"))
        elif line.startswith("+"):
            lines.append(click.style(line, fg="green"))
        elif line.startswith("-"):
            lines.append(click.style(line, fg="red"))
        else:
            lines.append(line)
    return "\n".join(lines)


@click.command()
@click.argument("component")
@click.pass_obj
@cli_error_boundary
def diff(ctx: LumanContext, component: str) -> None:
    """Show the changes between installed files and the registry's latest version."""
    config = require_project_config(ctx.project_dir)
    candidate = fetch_update_candidate(ctx.registry, component)
    diff_text = generate_diff(ctx.project_dir, component, candidate, config)
    machine_output(colorize_diff(diff_text))
