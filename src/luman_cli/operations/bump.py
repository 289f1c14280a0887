"""Version bumping for items of a local registry directory."""

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from luman_cli.exceptions import ComponentNotFoundError
from luman_cli.io.hashing import hash_content
from luman_cli.models.registry import RegistryItem
from luman_cli.models.semver import BumpType, bump_version
from luman_cli.registry.local import LocalRegistryClient


@dataclass(frozen=True)
class BumpResult:
    """Result of bumping a registry item."""

    component: str
    old_version: str
    new_version: str
    content_hash: str
    changelog_entries: int


def compute_item_hash(item: RegistryItem) -> str:
    """Hash of an item's file bodies, independent of file order."""
    contents = sorted(file.content or "" for file in item.files)
    return hash_content("".join(contents))


def bump_registry_item(
    registry_dir: Path,
    component_name: str,
    bump_type: BumpType,
    changes: list[str],
    *,
    now: datetime | None = None,
) -> BumpResult:
    """Bump version, content hash and changelog of a registry item together.

    Reads components/<name>.json, writes it back in one shot and keeps every
    key the item already had.

    Args:
        registry_dir: Root of a local registry directory
        component_name: Item to bump
        bump_type: major, minor or patch
        changes: Changelog lines for the new version
        now: Publication time (defaults to the current UTC time)

    Raises:
        ComponentNotFoundError: If the item does not exist
        ValueError: If changes is empty or the current version is malformed
    """
    cleaned = [change.strip() for change in changes if change.strip()]
    if not cleaned:
        raise ValueError("At least one changelog entry is required")

    client = LocalRegistryClient(registry_dir)
    item = client.get_item_with_content(component_name)
    if item is None:
        raise ComponentNotFoundError(component_name)

    item_path = client.item_path(component_name)
    data: dict[str, Any] = json.loads(item_path.read_text(encoding="utf-8"))

    published = now if now is not None else datetime.now(UTC)
    old_version = item.version
    new_version = bump_version(old_version, bump_type)
    content_hash = compute_item_hash(item)

    changelog = [
        {"version": new_version, "date": published.date().isoformat(), "changes": cleaned},
        *data.get("changelog", []),
    ]
    data["version"] = new_version
    data["contentHash"] = content_hash
    data["publishedAt"] = published.isoformat().replace("+00:00", "Z")
    data["changelog"] = changelog

    temp_path = item_path.with_suffix(".json.tmp")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    temp_path.replace(item_path)

    return BumpResult(
        component=component_name,
        old_version=old_version,
        new_version=new_version,
        content_hash=content_hash,
        changelog_entries=len(changelog),
    )
