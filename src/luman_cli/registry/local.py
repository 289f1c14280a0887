"""Registry client reading a registry directory on local disk."""

import json
from pathlib import Path
from typing import Any

from luman_cli.exceptions import RegistryUnavailableError
from luman_cli.models.registry import RegistryItem
from luman_cli.registry.abc import RegistryClient
from luman_cli.registry.real import parse_index, parse_item


class LocalRegistryClient(RegistryClient):
    """Serve a registry from a directory with the same layout as the HTTP one.

    Used when developing components inside the monorepo and by the
    `registry bump` maintenance command.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def location(self) -> str:
        return str(self._root)

    @property
    def root(self) -> Path:
        return self._root

    def item_path(self, name: str) -> Path:
        return self._root / "components" / f"{name}.json"

    def get_item(self, name: str) -> RegistryItem | None:
        item_path = self.item_path(name)
        if not item_path.exists():
            return None
        return parse_item(self._read_json(item_path), str(item_path))

    def get_file(self, name: str, path: str) -> str:
        file_path = self._root / "components" / name / path
        if not file_path.exists():
            raise RegistryUnavailableError(str(file_path), "file not found")
        with open(file_path, encoding="utf-8", newline="") as f:
            return f.read()

    def list_items(self) -> list[RegistryItem]:
        index_path = self._root / "index.json"
        if not index_path.exists():
            raise RegistryUnavailableError(str(index_path), "index.json not found")
        return parse_index(self._read_json(index_path), str(index_path))

    def _read_json(self, path: Path) -> Any:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise RegistryUnavailableError(str(path), f"not valid JSON ({e})") from e
