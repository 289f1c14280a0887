"""Tests for installing components."""

from pathlib import Path

import pytest

from luman_cli.exceptions import RegistryUnavailableError
from luman_cli.io.hashing import hash_content, hash_files
from luman_cli.io.manifest import read_manifest
from luman_cli.models.config import ProjectConfig
from luman_cli.models.registry import RegistryFile, RegistryItem
from luman_cli.operations.install import (
    compute_installed_hash,
    install_components,
    write_component_files,
)
from luman_cli.registry.fake import FakeRegistryClient
from test_utils.builders import make_item


def test_install_writes_files_and_records_manifest(
    project_dir: Path, config: ProjectConfig
) -> None:
    registry = FakeRegistryClient(items=[make_item("button", files={"ui/button.tsx": "btn\n"})])

    result = install_components(project_dir, ["button"], registry, config)

    assert result.installed == ["button"]
    assert result.files_written == ["src/components/ui/button.tsx"]
    assert (project_dir / "src/components/ui/button.tsx").read_text(encoding="utf-8") == "btn\n"

    manifest = read_manifest(project_dir)
    assert manifest is not None
    entry = manifest.components["button"]
    assert entry.version == "1.0.0"
    assert entry.files == ["src/components/ui/button.tsx"]
    assert entry.customized is False


def test_installed_hash_matches_files_on_disk(project_dir: Path, config: ProjectConfig) -> None:
    files = {"ui/card.tsx": "card\n", "lib/utils.ts": "utils\n"}
    registry = FakeRegistryClient(items=[make_item("card", files=files)])

    install_components(project_dir, ["card"], registry, config)

    manifest = read_manifest(project_dir)
    assert manifest is not None
    expected = hash_files(
        [project_dir / "src/components/ui/card.tsx", project_dir / "src/lib/utils.ts"]
    )
    assert manifest.components["card"].content_hash == expected


def test_install_includes_registry_dependencies(project_dir: Path, config: ProjectConfig) -> None:
    registry = FakeRegistryClient(
        items=[
            make_item("dialog", registry_dependencies=["button"], dependencies=["@radix/dialog"]),
            make_item("button", dependencies=["clsx", "@radix/dialog"]),
        ]
    )

    result = install_components(project_dir, ["dialog"], registry, config)

    assert result.installed == ["dialog", "button"]
    assert result.dependencies == ["@radix/dialog", "clsx"]
    manifest = read_manifest(project_dir)
    assert manifest is not None
    assert set(manifest.components) == {"dialog", "button"}


def test_install_reports_names_not_found(project_dir: Path, config: ProjectConfig) -> None:
    registry = FakeRegistryClient(items=[make_item("button")])

    result = install_components(project_dir, ["button", "ghost"], registry, config)

    assert result.installed == ["button"]
    assert result.not_found == ["ghost"]


def test_reinstall_overwrites_edits_and_resets_hash(
    project_dir: Path, config: ProjectConfig
) -> None:
    registry = FakeRegistryClient(items=[make_item("button", files={"ui/button.tsx": "btn\n"})])
    install_components(project_dir, ["button"], registry, config)
    (project_dir / "src/components/ui/button.tsx").write_text("edited\n", encoding="utf-8")

    install_components(project_dir, ["button"], registry, config)

    assert (project_dir / "src/components/ui/button.tsx").read_text(encoding="utf-8") == "btn\n"
    manifest = read_manifest(project_dir)
    assert manifest is not None
    assert manifest.components["button"].content_hash == hash_files(
        [project_dir / "src/components/ui/button.tsx"]
    )


def test_install_skips_excluded_names(project_dir: Path, config: ProjectConfig) -> None:
    registry = FakeRegistryClient(
        items=[make_item("dialog", registry_dependencies=["button"]), make_item("button")]
    )

    result = install_components(project_dir, ["dialog"], registry, config, exclude={"button"})

    assert result.installed == ["dialog"]
    assert not (project_dir / "src/components/ui/button.tsx").exists()


def test_install_fetches_content_not_inline(project_dir: Path, config: ProjectConfig) -> None:
    item = RegistryItem(name="badge", version="1.0.0", files=[RegistryFile(path="ui/badge.tsx")])
    registry = FakeRegistryClient(items=[item], files={("badge", "ui/badge.tsx"): "badge\n"})

    install_components(project_dir, ["badge"], registry, config)

    assert registry.fetched_files == [("badge", "ui/badge.tsx")]
    assert (project_dir / "src/components/ui/badge.tsx").read_text(encoding="utf-8") == "badge\n"


def test_install_fails_when_file_cannot_be_fetched(
    project_dir: Path, config: ProjectConfig
) -> None:
    item = RegistryItem(name="badge", version="1.0.0", files=[RegistryFile(path="ui/badge.tsx")])
    registry = FakeRegistryClient(items=[item])

    with pytest.raises(RegistryUnavailableError):
        install_components(project_dir, ["badge"], registry, config)

    assert read_manifest(project_dir) is None


def test_write_component_files_keeps_backup(project_dir: Path, config: ProjectConfig) -> None:
    target = project_dir / "src/components/ui/button.tsx"
    target.parent.mkdir(parents=True)
    target.write_text("old\n", encoding="utf-8")

    written = write_component_files(
        project_dir, make_item("button", files={"ui/button.tsx": "new\n"}), config, backup=True
    )

    assert written.backups == ["src/components/ui/button.tsx.backup"]
    assert (project_dir / written.backups[0]).read_text(encoding="utf-8") == "old\n"
    assert target.read_text(encoding="utf-8") == "new\n"


def test_compute_installed_hash_without_files(project_dir: Path) -> None:
    assert compute_installed_hash(project_dir, []) == ""


def test_write_component_files_preserves_line_endings(
    project_dir: Path, config: ProjectConfig
) -> None:
    item = make_item("button", files={"ui/button.tsx": "a\r\nb\r\n"})

    write_component_files(project_dir, item, config)

    data = (project_dir / "src/components/ui/button.tsx").read_bytes()
    assert data == b"a\r\nb\r\n"
    assert hash_content(data.decode("utf-8")) == hash_content("a\nb\n")
