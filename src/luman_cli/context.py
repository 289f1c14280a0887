"""Application context with dependency injection.

The LumanContext dataclass holds all dependencies (registry client, project
directory) and is created once at CLI entry point, then threaded through the
commands via Click's context object.
"""

from dataclasses import dataclass
from pathlib import Path

from luman_cli.io.config import get_registry_location, load_project_config
from luman_cli.registry import create_registry_client
from luman_cli.registry.abc import RegistryClient


@dataclass(frozen=True)
class LumanContext:
    """Immutable context holding all dependencies for luman-cli commands.

    Attributes:
        registry: Registry client used to resolve and fetch components
        project_dir: Project root (current working directory at CLI entry)
        debug: Debug flag (DEBUG logging, tracebacks logged on errors)
    """

    registry: RegistryClient
    project_dir: Path
    debug: bool

    @staticmethod
    def for_test(
        registry: RegistryClient | None = None,
        project_dir: Path | None = None,
        debug: bool = False,
    ) -> "LumanContext":
        """Create test context with optional pre-configured implementations.

        Args:
            registry: Optional RegistryClient. If None, creates an empty FakeRegistryClient.
            project_dir: Project directory (defaults to Path("/fake/project"))
            debug: Whether to enable debug mode (default False)

        Example:
            >>> from luman_cli.registry.fake import FakeRegistryClient
            >>> ctx = LumanContext.for_test(registry=FakeRegistryClient(), project_dir=tmp_path)
        """
        from luman_cli.registry.fake import FakeRegistryClient

        resolved_registry: RegistryClient = (
            registry if registry is not None else FakeRegistryClient()
        )
        resolved_project_dir: Path = (
            project_dir if project_dir is not None else Path("/fake/project")
        )

        return LumanContext(
            registry=resolved_registry,
            project_dir=resolved_project_dir,
            debug=debug,
        )


def create_context(*, debug: bool, registry_location: str | None = None) -> LumanContext:
    """Create production context with real implementations.

    The registry location comes from, in order: the registry_location
    argument, LUMAN_REGISTRY_URL, luman.toml, the public default.

    Raises:
        ConfigError: If luman.toml exists but is malformed
    """
    project_dir = Path.cwd()

    if registry_location is None:
        registry_location = get_registry_location(load_project_config(project_dir))

    return LumanContext(
        registry=create_registry_client(registry_location),
        project_dir=project_dir,
        debug=debug,
    )
