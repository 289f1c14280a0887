"""Update installed components to the registry's latest version."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from luman_cli.exceptions import ComponentNotFoundError, ComponentNotInstalledError
from luman_cli.io.manifest import read_manifest
from luman_cli.models.config import ProjectConfig
from luman_cli.models.registry import ChangelogEntry, RegistryItem
from luman_cli.models.status import StatusResult
from luman_cli.operations.install import (
    install_components,
    record_installation,
    write_component_files,
)
from luman_cli.operations.status import check_component_status
from luman_cli.registry.abc import RegistryClient
from luman_cli.version import __version__

logger = logging.getLogger(__name__)

_BREAKING_RE = re.compile(r"BREAKING|major", re.IGNORECASE)


@dataclass(frozen=True)
class UpdateResult:
    """Result of updating one component."""

    component: str
    status: StatusResult
    old_version: str | None
    new_version: str | None
    was_updated: bool
    blocked_by_customization: bool = False
    files_written: list[str] = field(default_factory=list)
    files_removed: list[str] = field(default_factory=list)
    backups: list[str] = field(default_factory=list)
    new_dependencies: list[str] = field(default_factory=list)


def is_breaking_change(entry: ChangelogEntry) -> bool:
    """Whether a changelog entry announces a breaking change."""
    return _BREAKING_RE.search(" ".join(entry.changes)) is not None


def fetch_update_candidate(registry: RegistryClient, component_name: str) -> RegistryItem:
    """Fetch the latest published version with file content populated.

    Raises:
        ComponentNotFoundError: If the registry does not serve the component
        RegistryUnavailableError: If the registry cannot be reached
    """
    item = registry.get_item_with_content(component_name)
    if item is None:
        raise ComponentNotFoundError(component_name)
    return item


def update_component(
    project_dir: Path,
    component_name: str,
    registry: RegistryClient,
    config: ProjectConfig,
    *,
    force: bool = False,
    backup: bool = False,
    status: StatusResult | None = None,
    candidate: RegistryItem | None = None,
    cli_version: str = __version__,
) -> UpdateResult:
    """Update an installed component.

    Pristine components that are current are left alone, as are customized
    ones unless force is set. Files the new version no longer ships are
    deleted, and registry dependencies that are not installed yet get
    installed.

    Args:
        project_dir: Project root directory
        component_name: Component to update
        registry: Registry to fetch the latest version from
        config: Project configuration supplying the path aliases
        force: Overwrite customizations, and reinstall even when unchanged
        backup: Keep a <file>.backup copy of every overwritten file
        status: Classification the caller already made; computed here when None
        candidate: Latest item with content, as already shown to the user;
            fetched here when None

    Raises:
        ComponentNotInstalledError: If the component is untracked
        ComponentNotFoundError: If the registry does not serve the component
        RegistryUnavailableError: If the registry cannot be reached
    """
    manifest = read_manifest(project_dir)
    if manifest is None or component_name not in manifest.components:
        raise ComponentNotInstalledError(component_name)

    entry = manifest.components[component_name]
    if status is None:
        status = check_component_status(project_dir, component_name, registry)

    if status.state == "unchanged" and not force:
        return UpdateResult(
            component=component_name,
            status=status,
            old_version=entry.version,
            new_version=entry.version,
            was_updated=False,
        )

    if status.state == "customized" and not force:
        return UpdateResult(
            component=component_name,
            status=status,
            old_version=entry.version,
            new_version=None,
            was_updated=False,
            blocked_by_customization=True,
        )

    if candidate is None:
        candidate = fetch_update_candidate(registry, component_name)
    written = write_component_files(project_dir, candidate, config, backup=backup)

    files_removed: list[str] = []
    for path in entry.files:
        full_path = project_dir / path
        if path not in written.paths and full_path.exists():
            full_path.unlink()
            files_removed.append(path)

    record_installation(project_dir, candidate, written.paths, cli_version=cli_version)
    logger.debug("Updated %s: %s -> %s", component_name, entry.version, candidate.version)

    new_dependencies = _install_new_dependencies(
        project_dir, candidate, registry, config, cli_version=cli_version
    )

    return UpdateResult(
        component=component_name,
        status=status,
        old_version=entry.version,
        new_version=candidate.version,
        was_updated=True,
        files_written=written.paths,
        files_removed=files_removed,
        backups=written.backups,
        new_dependencies=new_dependencies,
    )


def _install_new_dependencies(
    project_dir: Path,
    candidate: RegistryItem,
    registry: RegistryClient,
    config: ProjectConfig,
    *,
    cli_version: str,
) -> list[str]:
    manifest = read_manifest(project_dir)
    installed = set(manifest.components) if manifest is not None else set()
    missing = [name for name in candidate.registry_dependencies if name not in installed]
    if not missing:
        return []

    result = install_components(
        project_dir,
        missing,
        registry,
        config,
        exclude=installed,
        cli_version=cli_version,
    )
    return result.installed
