"""Tests for the diff command."""

from pathlib import Path

from click.testing import CliRunner

from luman_cli.cli import cli
from luman_cli.commands.diff import colorize_diff
from luman_cli.context import LumanContext
from luman_cli.models.config import ProjectConfig
from luman_cli.operations.diff import NO_CHANGES
from luman_cli.registry.fake import FakeRegistryClient
from test_utils.builders import install, make_item


def test_diff_shows_changes(
    cli_runner: CliRunner, project_dir: Path, config: ProjectConfig
) -> None:
    install(project_dir, config, make_item("button", files={"ui/button.tsx": "old\n"}))
    registry = FakeRegistryClient(
        items=[make_item("button", version="1.1.0", files={"ui/button.tsx": "new\n"})]
    )
    ctx = LumanContext.for_test(registry=registry, project_dir=project_dir)

    result = cli_runner.invoke(cli, ["diff", "button"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "--- src/components/ui/button.tsx" in result.output
    assert "-old" in result.output
    assert "+new" in result.output


def test_diff_without_changes(
    cli_runner: CliRunner, project_dir: Path, config: ProjectConfig
) -> None:
    button = make_item("button")
    install(project_dir, config, button)
    registry = FakeRegistryClient(items=[button])
    ctx = LumanContext.for_test(registry=registry, project_dir=project_dir)

    result = cli_runner.invoke(cli, ["diff", "button"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert NO_CHANGES in result.output


def test_diff_unknown_component(cli_runner: CliRunner, project_dir: Path) -> None:
    ctx = LumanContext.for_test(project_dir=project_dir)

    result = cli_runner.invoke(cli, ["diff", "ghost"], obj=ctx)

    assert result.exit_code == 1
    assert "Component 'ghost' not found in registry" in result.output


def test_colorize_diff_leaves_no_changes_message_alone() -> None:
    assert colorize_diff(NO_CHANGES) == NO_CHANGES


def test_colorize_diff_styles_lines() -> None:
    colored = colorize_diff("--- a\n+++ b\n@@ -1 +1 @@\n-old\n+new")

    lines = colored.splitlines()
    assert "\x1b[31m-old" in lines[3]
    assert "\x1b[32m+new" in lines[4]
