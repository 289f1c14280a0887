"""Builders for registry items and installed projects used across tests."""

import json
from pathlib import Path

from luman_cli.models.config import ProjectConfig
from luman_cli.models.registry import ChangelogEntry, RegistryFile, RegistryItem
from luman_cli.operations.install import install_components
from luman_cli.registry.fake import FakeRegistryClient


def make_item(
    name: str,
    *,
    files: dict[str, str] | None = None,
    registry_dependencies: list[str] | None = None,
    dependencies: list[str] | None = None,
    version: str = "1.0.0",
    changelog: list[ChangelogEntry] | None = None,
) -> RegistryItem:
    """Build a registry item with inline file content.

    Defaults to a single ui/<name>.tsx file.
    """
    if files is None:
        files = {f"ui/{name}.tsx": f"export function {name.capitalize()}() {{}}\n"}

    return RegistryItem(
        name=name,
        version=version,
        files=[RegistryFile(path=path, content=content) for path, content in files.items()],
        registry_dependencies=registry_dependencies or [],
        dependencies=dependencies or [],
        changelog=changelog or [],
    )


def install(project_dir: Path, config: ProjectConfig, *items: RegistryItem) -> None:
    """Install items into project_dir as `luman add` would."""
    registry = FakeRegistryClient(items=list(items))
    install_components(project_dir, [item.name for item in items], registry, config)


def write_local_registry(root: Path, *items: RegistryItem, index: bool = True) -> Path:
    """Lay items out as a local registry directory.

    Metadata goes to components/<name>.json without file bodies; each body is
    written to components/<name>/<path>.
    """
    components_dir = root / "components"
    components_dir.mkdir(parents=True, exist_ok=True)

    for item in items:
        wire = item.to_wire()
        wire["files"] = [{"path": f.path, "type": f.type} for f in item.files]
        (components_dir / f"{item.name}.json").write_text(json.dumps(wire), encoding="utf-8")
        for file in item.files:
            body_path = components_dir / item.name / file.path
            body_path.parent.mkdir(parents=True, exist_ok=True)
            body_path.write_bytes((file.content or "").encode("utf-8"))

    if index:
        entries = [{"name": item.name, "version": item.version} for item in items]
        (root / "index.json").write_text(json.dumps({"components": entries}), encoding="utf-8")
    return root
