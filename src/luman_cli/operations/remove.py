"""Remove installed components from a project."""

from dataclasses import dataclass
from pathlib import Path

from luman_cli.exceptions import ComponentNotInstalledError
from luman_cli.io.manifest import read_manifest, remove_component


@dataclass(frozen=True)
class RemoveResult:
    """Result of removing a component."""

    component: str
    version: str
    deleted: list[str]
    already_missing: list[str]


def remove_installed_component(project_dir: Path, component_name: str) -> RemoveResult:
    """Delete a component's recorded files and drop its manifest entry.

    npm dependencies are left alone.

    Raises:
        ComponentNotInstalledError: If the manifest has no entry for the name
    """
    manifest = read_manifest(project_dir)
    if manifest is None or component_name not in manifest.components:
        raise ComponentNotInstalledError(component_name)

    entry = manifest.components[component_name]

    deleted: list[str] = []
    already_missing: list[str] = []
    for path in entry.files:
        full_path = project_dir / path
        if full_path.exists():
            full_path.unlink()
            deleted.append(path)
        else:
            already_missing.append(path)

    remove_component(project_dir, component_name)

    return RemoveResult(
        component=component_name,
        version=entry.version,
        deleted=deleted,
        already_missing=already_missing,
    )
