"""Abstract interface for component registry access."""

from abc import ABC, abstractmethod

from luman_cli.models.registry import RegistryFile, RegistryItem


class RegistryClient(ABC):
    """Abstract interface for fetching components from a registry.

    All implementations (real and fake) must implement this interface.
    Implementations keep no cache of their own.
    """

    @abstractmethod
    def get_item(self, name: str) -> RegistryItem | None:
        """Fetch component metadata by name.

        Args:
            name: Component name

        Returns:
            RegistryItem without file bodies, or None if the registry does not
            serve a component with that name

        Raises:
            RegistryUnavailableError: If the registry cannot be reached, times
                out, or returns malformed data
        """
        ...

    @abstractmethod
    def get_file(self, name: str, path: str) -> str:
        """Fetch the raw body of one component file.

        Args:
            name: Component name
            path: Registry-relative file path (e.g. "ui/button.tsx")

        Raises:
            RegistryUnavailableError: If the file cannot be fetched
        """
        ...

    @abstractmethod
    def list_items(self) -> list[RegistryItem]:
        """Fetch the catalog listing from index.json.

        Raises:
            RegistryUnavailableError: If the registry cannot be reached
        """
        ...

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable registry location (URL or directory)."""
        ...

    def with_content(self, item: RegistryItem) -> RegistryItem:
        """Return a copy of item with every file's content populated.

        Files that already carry inline content are not fetched again.
        """
        files: list[RegistryFile] = []
        for file in item.files:
            if file.content is not None:
                files.append(file)
                continue
            content = self.get_file(item.name, file.path)
            files.append(file.model_copy(update={"content": content}))

        return item.model_copy(update={"files": files})

    def get_item_with_content(self, name: str) -> RegistryItem | None:
        """Fetch component metadata and populate every file's content."""
        item = self.get_item(name)
        if item is None:
            return None
        return self.with_content(item)
