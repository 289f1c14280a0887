"""Installation manifest I/O for .luman/manifest.json.

The manifest is read and fully rewritten on every mutation. There is no
locking; two concurrent invocations against one project can lose an update.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from luman_cli.exceptions import ManifestError
from luman_cli.models.manifest import MANIFEST_SCHEMA_VERSION, Manifest, ManifestEntry
from luman_cli.version import __version__

logger = logging.getLogger(__name__)

MANIFEST_PATH = Path(".luman") / "manifest.json"


def get_manifest_path(project_dir: Path) -> Path:
    """Get absolute path to the manifest file for a project."""
    return project_dir / MANIFEST_PATH


def manifest_exists(project_dir: Path) -> bool:
    return get_manifest_path(project_dir).exists()


def read_manifest(project_dir: Path) -> Manifest | None:
    """Read and validate the manifest file.

    Returns None if the file doesn't exist.

    Raises:
        ManifestError: If the file is not valid JSON or does not match the schema
    """
    manifest_path = get_manifest_path(project_dir)
    if not manifest_path.exists():
        return None

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestError(manifest_path, f"not valid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ManifestError(manifest_path, "top-level value must be an object")

    schema_version = data.get("schemaVersion")
    if schema_version != MANIFEST_SCHEMA_VERSION:
        raise ManifestError(
            manifest_path,
            f"unsupported schemaVersion {schema_version!r} (expected {MANIFEST_SCHEMA_VERSION})",
        )

    try:
        return Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(manifest_path, str(e)) from e


def write_manifest(project_dir: Path, manifest: Manifest) -> None:
    """Write the manifest file, replacing any previous content.

    Writes to a temporary file first, then renames over the target so readers
    never see a half-written manifest. Creates .luman/ if it doesn't exist.
    """
    manifest_path = get_manifest_path(project_dir)
    manifest_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = manifest_path.with_suffix(".json.tmp")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(manifest.to_json_dict(), f, indent=2)
        f.write("\n")

    temp_path.replace(manifest_path)


def create_empty_manifest(cli_version: str) -> Manifest:
    return Manifest(
        schema_version=MANIFEST_SCHEMA_VERSION,
        installed_at=datetime.now(UTC),
        cli_version=cli_version,
        components={},
    )


def initialize_manifest(project_dir: Path, cli_version: str = __version__) -> Manifest:
    """Create and persist a fresh manifest with no components installed."""
    manifest = create_empty_manifest(cli_version)
    write_manifest(project_dir, manifest)
    logger.debug("Initialized manifest at %s", get_manifest_path(project_dir))
    return manifest


def upsert_component(
    project_dir: Path,
    component_name: str,
    version: str,
    content_hash: str,
    files: list[str],
    *,
    cli_version: str = __version__,
) -> Manifest:
    """Add or replace a component entry.

    Initializes the manifest first if it doesn't exist. The entry is always
    recorded as not customized with a fresh install timestamp.

    Args:
        project_dir: Project root directory
        component_name: Component name (e.g. "button")
        version: Installed version (e.g. "1.0.0")
        content_hash: Combined hash of the installed files
        files: Installed file paths relative to project_dir
        cli_version: Recorded when a new manifest has to be created

    Returns:
        The manifest as written
    """
    manifest = read_manifest(project_dir)
    if manifest is None:
        manifest = create_empty_manifest(cli_version)

    entry = ManifestEntry(
        version=version,
        content_hash=content_hash,
        installed_at=datetime.now(UTC),
        customized=False,
        files=list(files),
    )
    updated = manifest.with_component(component_name, entry)
    write_manifest(project_dir, updated)
    return updated


def remove_component(project_dir: Path, component_name: str) -> None:
    """Remove a component entry.

    Does nothing if the manifest or the entry does not exist.
    """
    manifest = read_manifest(project_dir)
    if manifest is None or component_name not in manifest.components:
        return

    write_manifest(project_dir, manifest.without_component(component_name))


def update_customized_flag(project_dir: Path, component_name: str, customized: bool) -> None:
    """Record whether a component's files have been customized.

    Does nothing if the manifest or the entry does not exist.
    """
    manifest = read_manifest(project_dir)
    if manifest is None or component_name not in manifest.components:
        return

    entry = manifest.components[component_name]
    if entry.customized == customized:
        return

    updated_entry = entry.model_copy(update={"customized": customized})
    write_manifest(project_dir, manifest.with_component(component_name, updated_entry))
