"""Exceptions raised by luman-cli operations."""

from pathlib import Path


class LumanError(Exception):
    """Base class for errors reported cleanly at the CLI boundary."""


class ManifestError(LumanError):
    """Raised when the installation manifest cannot be parsed or validated."""

    def __init__(self, manifest_path: Path, reason: str) -> None:
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"Invalid manifest file {manifest_path}: {reason}")


class ConfigError(LumanError):
    """Raised when the project configuration is missing or malformed."""


class RegistryUnavailableError(LumanError):
    """Raised when the registry cannot be reached or returns garbage."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Registry unavailable ({location}): {reason}")


class ComponentNotFoundError(LumanError):
    """Raised when a component is required but the registry does not serve it."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Component '{name}' not found in registry")


class ComponentNotInstalledError(LumanError):
    """Raised when an operation needs a manifest entry that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Component '{name}' is not installed in this project")
