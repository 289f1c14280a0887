"""Status classification for installed components.

Compares three sources that may each be stale or unavailable: the manifest,
the files on disk and the registry. An unreachable registry never produces
"outdated"; the update flow downstream overwrites files, so an unknown
latest version must read as "unchanged".
"""

import logging
from pathlib import Path

from luman_cli.exceptions import RegistryUnavailableError
from luman_cli.io.hashing import hash_files
from luman_cli.io.manifest import read_manifest
from luman_cli.models.manifest import ManifestEntry
from luman_cli.models.status import (
    Customized,
    FileStatus,
    Outdated,
    StatusResult,
    Unchanged,
    Untracked,
)
from luman_cli.registry.abc import RegistryClient

logger = logging.getLogger(__name__)


def check_component_status(
    project_dir: Path,
    component_name: str,
    registry: RegistryClient | None,
) -> StatusResult:
    """Classify one component.

    Args:
        project_dir: Project root directory
        component_name: Component name to check
        registry: Registry to ask for the latest version, or None to stay offline

    Returns:
        StatusResult with exactly one state and the per-file detail

    Raises:
        ManifestError: If the manifest exists but is malformed
    """
    manifest = read_manifest(project_dir)
    if manifest is None or component_name not in manifest.components:
        return StatusResult(component=component_name, status=Untracked(), files=[])

    entry = manifest.components[component_name]
    return _classify_entry(project_dir, component_name, entry, registry)


def check_all_components_status(
    project_dir: Path,
    registry: RegistryClient | None,
) -> list[StatusResult]:
    """Classify every component recorded in the manifest.

    Returns an empty list if no manifest exists.
    """
    manifest = read_manifest(project_dir)
    if manifest is None:
        return []

    return [
        _classify_entry(project_dir, name, entry, registry)
        for name, entry in manifest.components.items()
    ]


def _classify_entry(
    project_dir: Path,
    component_name: str,
    entry: ManifestEntry,
    registry: RegistryClient | None,
) -> StatusResult:
    file_statuses = [
        FileStatus(path=path, status="ok" if (project_dir / path).exists() else "missing")
        for path in entry.files
    ]
    existing = [project_dir / f.path for f in file_statuses if f.status == "ok"]

    # With no surviving files the hash is "", so a fully deleted component
    # reads as customized
    current_hash = hash_files(existing) if existing else ""

    if current_hash != entry.content_hash:
        return StatusResult(
            component=component_name,
            status=Customized(version=entry.version),
            files=[
                FileStatus(path=f.path, status="modified") if f.status == "ok" else f
                for f in file_statuses
            ],
        )

    latest_version = _fetch_latest_version(component_name, registry)
    if latest_version is not None and latest_version != entry.version:
        return StatusResult(
            component=component_name,
            status=Outdated(installed_version=entry.version, latest_version=latest_version),
            files=file_statuses,
        )

    return StatusResult(
        component=component_name,
        status=Unchanged(version=entry.version),
        files=file_statuses,
    )


def _fetch_latest_version(component_name: str, registry: RegistryClient | None) -> str | None:
    if registry is None:
        return None

    try:
        item = registry.get_item(component_name)
    except RegistryUnavailableError as e:
        logger.debug("Could not check %s for updates: %s", component_name, e)
        return None

    if item is None:
        return None
    return item.version
