"""Install components from the registry into a project."""

import logging
import shutil
from collections.abc import Collection
from dataclasses import dataclass, field
from pathlib import Path

from luman_cli.io.config import resolve_file_path
from luman_cli.io.hashing import hash_files
from luman_cli.io.manifest import upsert_component
from luman_cli.models.config import ProjectConfig
from luman_cli.models.registry import RegistryItem
from luman_cli.operations.resolve import resolve_dependencies
from luman_cli.registry.abc import RegistryClient
from luman_cli.version import __version__

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".backup"


@dataclass(frozen=True)
class WrittenFiles:
    """Files written for one component."""

    paths: list[str]  # Project-relative, in registry order
    backups: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class InstallResult:
    """Result of installing one or more components."""

    installed: list[str]
    files_written: list[str]
    dependencies: list[str]
    dev_dependencies: list[str]
    not_found: list[str]


def write_component_files(
    project_dir: Path,
    item: RegistryItem,
    config: ProjectConfig,
    *,
    backup: bool = False,
) -> WrittenFiles:
    """Write an item's files to their aliased locations.

    Args:
        project_dir: Project root directory
        item: Registry item with content populated
        config: Project configuration supplying the path aliases
        backup: If True, copy an existing file to <file>.backup before overwriting
    """
    paths: list[str] = []
    backups: list[str] = []

    for file in item.files:
        target = resolve_file_path(config, file.path)
        full_path = project_dir / target

        if backup and full_path.exists():
            backup_path = full_path.with_name(full_path.name + BACKUP_SUFFIX)
            shutil.copy2(full_path, backup_path)
            backups.append(str(backup_path.relative_to(project_dir)))

        full_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" writes the registry's line endings untouched
        with open(full_path, "w", encoding="utf-8", newline="") as f:
            f.write(file.content or "")
        paths.append(target)

    return WrittenFiles(paths=paths, backups=backups)


def compute_installed_hash(project_dir: Path, paths: list[str]) -> str:
    """Combined hash of installed files; empty string for a component without files."""
    if not paths:
        return ""
    return hash_files(project_dir / path for path in paths)


def record_installation(
    project_dir: Path,
    item: RegistryItem,
    paths: list[str],
    *,
    cli_version: str = __version__,
) -> None:
    """Hash the written files and record the component in the manifest."""
    content_hash = compute_installed_hash(project_dir, paths)
    upsert_component(
        project_dir,
        item.name,
        item.version,
        content_hash,
        paths,
        cli_version=cli_version,
    )


def install_components(
    project_dir: Path,
    names: list[str],
    registry: RegistryClient,
    config: ProjectConfig,
    *,
    exclude: Collection[str] = (),
    cli_version: str = __version__,
) -> InstallResult:
    """Install components and their registry dependencies.

    Every resolved component is written and recorded in the manifest, which
    is also how a reinstall converges with an update. npm dependencies are
    collected and returned, never installed here.

    Args:
        exclude: Resolved names to leave untouched (e.g. already installed ones)

    Raises:
        RegistryUnavailableError: If a resolved component's files cannot be fetched
    """
    resolved = resolve_dependencies(names, registry)
    resolved_names = {item.name for item in resolved}
    not_found = [name for name in dict.fromkeys(names) if name not in resolved_names]
    items = [item for item in resolved if item.name not in exclude]

    files_written: list[str] = []
    dependencies: dict[str, None] = {}
    dev_dependencies: dict[str, None] = {}

    for item in items:
        full_item = registry.with_content(item)
        written = write_component_files(project_dir, full_item, config)
        record_installation(project_dir, full_item, written.paths, cli_version=cli_version)
        logger.debug("Installed %s@%s (%d files)", item.name, item.version, len(written.paths))

        files_written.extend(written.paths)
        dependencies.update(dict.fromkeys(item.dependencies))
        dev_dependencies.update(dict.fromkeys(item.dev_dependencies))

    return InstallResult(
        installed=[item.name for item in items],
        files_written=files_written,
        dependencies=list(dependencies),
        dev_dependencies=list(dev_dependencies),
        not_found=not_found,
    )
