from pathlib import Path

from luman_cli.registry.abc import RegistryClient
from luman_cli.registry.local import LocalRegistryClient
from luman_cli.registry.real import DEFAULT_TIMEOUT_SECONDS, HttpRegistryClient


def create_registry_client(
    location: str, *, timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> RegistryClient:
    """Create a client for an http(s) URL or a local registry directory."""
    if location.startswith(("http://", "https://")):
        return HttpRegistryClient(location, timeout=timeout)
    return LocalRegistryClient(Path(location).expanduser())


__all__ = [
    "HttpRegistryClient",
    "LocalRegistryClient",
    "RegistryClient",
    "create_registry_client",
]
