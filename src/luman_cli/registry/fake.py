"""In-memory fake registry client for testing."""

from luman_cli.exceptions import RegistryUnavailableError
from luman_cli.models.registry import RegistryItem
from luman_cli.registry.abc import RegistryClient


class FakeRegistryClient(RegistryClient):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        items: list[RegistryItem] | None = None,
        files: dict[tuple[str, str], str] | None = None,
        offline: bool = False,
        unavailable_items: set[str] | None = None,
    ) -> None:
        """Create FakeRegistryClient with pre-configured state.

        Args:
            items: Components the registry serves
            files: Mapping of (component name, registry path) -> file body, for
                files whose content is not inline on the item
            offline: If True, every call raises RegistryUnavailableError
            unavailable_items: Names whose lookup raises RegistryUnavailableError
                (simulates a timeout on one fetch)
        """
        self._items = {item.name: item for item in items or []}
        self._files = files or {}
        self._offline = offline
        self._unavailable_items = unavailable_items or set()
        self._fetched_items: list[str] = []
        self._fetched_files: list[tuple[str, str]] = []

    @property
    def fetched_items(self) -> list[str]:
        """Names passed to get_item(), in call order.

        This property is for test assertions only.
        """
        return self._fetched_items

    @property
    def fetched_files(self) -> list[tuple[str, str]]:
        """(name, path) pairs passed to get_file(), in call order."""
        return self._fetched_files

    @property
    def location(self) -> str:
        return "fake://registry"

    def get_item(self, name: str) -> RegistryItem | None:
        self._fetched_items.append(name)
        if self._offline or name in self._unavailable_items:
            raise RegistryUnavailableError(self.location, f"timed out fetching {name}")
        return self._items.get(name)

    def get_file(self, name: str, path: str) -> str:
        self._fetched_files.append((name, path))
        if self._offline:
            raise RegistryUnavailableError(self.location, "offline")
        if (name, path) not in self._files:
            raise RegistryUnavailableError(self.location, f"file not found: {name}/{path}")
        return self._files[(name, path)]

    def list_items(self) -> list[RegistryItem]:
        if self._offline:
            raise RegistryUnavailableError(self.location, "offline")
        return list(self._items.values())
