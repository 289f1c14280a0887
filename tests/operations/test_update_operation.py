"""Tests for updating installed components."""

from pathlib import Path

import pytest

from luman_cli.exceptions import ComponentNotFoundError, ComponentNotInstalledError
from luman_cli.io.manifest import read_manifest
from luman_cli.models.config import ProjectConfig
from luman_cli.models.registry import ChangelogEntry
from luman_cli.operations.status import check_component_status
from luman_cli.operations.update import is_breaking_change, update_component
from luman_cli.registry.fake import FakeRegistryClient
from test_utils.builders import install, make_item

BUTTON_PATH = "src/components/ui/button.tsx"


def test_update_outdated_component(project_dir: Path, config: ProjectConfig) -> None:
    install(project_dir, config, make_item("button", files={"ui/button.tsx": "v1\n"}))
    registry = FakeRegistryClient(
        items=[make_item("button", version="1.1.0", files={"ui/button.tsx": "v2\n"})]
    )

    result = update_component(project_dir, "button", registry, config)

    assert result.was_updated
    assert result.old_version == "1.0.0"
    assert result.new_version == "1.1.0"
    assert result.files_written == [BUTTON_PATH]
    assert (project_dir / BUTTON_PATH).read_text(encoding="utf-8") == "v2\n"
    manifest = read_manifest(project_dir)
    assert manifest is not None
    assert manifest.components["button"].version == "1.1.0"


def test_update_unchanged_component_is_noop(project_dir: Path, config: ProjectConfig) -> None:
    button = make_item("button")
    install(project_dir, config, button)
    registry = FakeRegistryClient(items=[button])

    result = update_component(project_dir, "button", registry, config)

    assert not result.was_updated
    assert result.status.state == "unchanged"
    assert registry.fetched_files == []


def test_update_customized_component_is_blocked(project_dir: Path, config: ProjectConfig) -> None:
    install(project_dir, config, make_item("button"))
    (project_dir / BUTTON_PATH).write_text("mine\n", encoding="utf-8")
    registry = FakeRegistryClient(items=[make_item("button", version="2.0.0")])

    result = update_component(project_dir, "button", registry, config)

    assert not result.was_updated
    assert result.blocked_by_customization
    assert (project_dir / BUTTON_PATH).read_text(encoding="utf-8") == "mine\n"


def test_force_update_overwrites_customization_with_backup(
    project_dir: Path, config: ProjectConfig
) -> None:
    install(project_dir, config, make_item("button"))
    (project_dir / BUTTON_PATH).write_text("mine\n", encoding="utf-8")
    registry = FakeRegistryClient(
        items=[make_item("button", version="2.0.0", files={"ui/button.tsx": "v2\n"})]
    )

    result = update_component(project_dir, "button", registry, config, force=True, backup=True)

    assert result.was_updated
    assert result.backups == [f"{BUTTON_PATH}.backup"]
    assert (project_dir / f"{BUTTON_PATH}.backup").read_text(encoding="utf-8") == "mine\n"
    assert (project_dir / BUTTON_PATH).read_text(encoding="utf-8") == "v2\n"
    manifest = read_manifest(project_dir)
    assert manifest is not None
    assert manifest.components["button"].customized is False


def test_update_deleted_component_is_blocked_without_force(
    project_dir: Path, config: ProjectConfig
) -> None:
    """Deleting every file counts as a customization and is never silently undone."""
    install(project_dir, config, make_item("button"))
    (project_dir / BUTTON_PATH).unlink()
    registry = FakeRegistryClient(items=[make_item("button", version="1.1.0")])

    result = update_component(project_dir, "button", registry, config)

    assert not result.was_updated
    assert result.blocked_by_customization
    assert not (project_dir / BUTTON_PATH).exists()


def test_update_reuses_given_status_and_candidate(
    project_dir: Path, config: ProjectConfig
) -> None:
    """A caller that already classified and fetched does not hit the registry again."""
    install(project_dir, config, make_item("button", files={"ui/button.tsx": "v1\n"}))
    latest = make_item("button", version="1.1.0", files={"ui/button.tsx": "v2\n"})
    status = check_component_status(project_dir, "button", FakeRegistryClient(items=[latest]))
    registry = FakeRegistryClient(items=[latest])

    result = update_component(
        project_dir, "button", registry, config, status=status, candidate=latest
    )

    assert result.was_updated
    assert result.status is status
    assert registry.fetched_items == []
    assert (project_dir / BUTTON_PATH).read_text(encoding="utf-8") == "v2\n"


def test_update_untracked_component_raises(project_dir: Path, config: ProjectConfig) -> None:
    with pytest.raises(ComponentNotInstalledError):
        update_component(project_dir, "button", FakeRegistryClient(), config)


def test_force_update_of_component_registry_dropped(
    project_dir: Path, config: ProjectConfig
) -> None:
    install(project_dir, config, make_item("button"))

    with pytest.raises(ComponentNotFoundError):
        update_component(project_dir, "button", FakeRegistryClient(), config, force=True)


def test_update_removes_files_no_longer_shipped(project_dir: Path, config: ProjectConfig) -> None:
    old = make_item("card", files={"ui/card.tsx": "card\n", "ui/card-footer.tsx": "footer\n"})
    install(project_dir, config, old)
    new = make_item("card", version="2.0.0", files={"ui/card.tsx": "card v2\n"})

    result = update_component(project_dir, "card", FakeRegistryClient(items=[new]), config)

    assert result.files_removed == ["src/components/ui/card-footer.tsx"]
    assert not (project_dir / "src/components/ui/card-footer.tsx").exists()
    manifest = read_manifest(project_dir)
    assert manifest is not None
    assert manifest.components["card"].files == ["src/components/ui/card.tsx"]


def test_update_installs_new_registry_dependencies(
    project_dir: Path, config: ProjectConfig
) -> None:
    install(project_dir, config, make_item("dialog"), make_item("button"))
    (project_dir / BUTTON_PATH).write_text("customized button\n", encoding="utf-8")
    registry = FakeRegistryClient(
        items=[
            make_item("dialog", version="1.1.0", registry_dependencies=["button", "icon"]),
            make_item("button", version="3.0.0"),
            make_item("icon"),
        ]
    )

    result = update_component(project_dir, "dialog", registry, config)

    assert result.new_dependencies == ["icon"]
    assert (project_dir / "src/components/ui/icon.tsx").exists()
    assert (project_dir / BUTTON_PATH).read_text(encoding="utf-8") == "customized button\n"


@pytest.mark.parametrize(
    ("changes", "expected"),
    [
        (["BREAKING: renamed prop"], True),
        (["Major rewrite of variants"], True),
        (["breaking change in API"], True),
        (["Added ghost variant"], False),
        ([], False),
    ],
)
def test_is_breaking_change(changes: list[str], expected: bool) -> None:
    entry = ChangelogEntry(version="2.0.0", date="2025-01-01", changes=changes)

    assert is_breaking_change(entry) is expected
