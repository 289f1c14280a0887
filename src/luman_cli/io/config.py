"""Project configuration I/O for luman.toml."""

import os
from pathlib import Path, PurePosixPath

import tomli
import tomli_w
from pydantic import ValidationError

from luman_cli.exceptions import ConfigError
from luman_cli.models.config import DEFAULT_REGISTRY_URL, Aliases, ProjectConfig

CONFIG_FILENAME = "luman.toml"
REGISTRY_ENV_VAR = "LUMAN_REGISTRY_URL"


def get_config_path(project_dir: Path) -> Path:
    return project_dir / CONFIG_FILENAME


def load_project_config(project_dir: Path) -> ProjectConfig | None:
    """Load luman.toml from project directory.

    Returns None if file doesn't exist.

    Raises:
        ConfigError: If the file is not valid TOML or misses required fields
    """
    config_path = get_config_path(project_dir)
    if not config_path.exists():
        return None

    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"Invalid {config_path}: {e}") from e

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {config_path}: {e}") from e


def require_project_config(project_dir: Path) -> ProjectConfig:
    """Load luman.toml, failing when the project was never initialized.

    Raises:
        ConfigError: If the file doesn't exist or is malformed
    """
    config = load_project_config(project_dir)
    if config is None:
        raise ConfigError(f"No {CONFIG_FILENAME} found in {project_dir}. Run `luman init` first.")
    return config


def save_project_config(project_dir: Path, config: ProjectConfig) -> None:
    """Save luman.toml to project directory."""
    data = config.model_dump(exclude_none=True)

    with open(get_config_path(project_dir), "wb") as f:
        tomli_w.dump(data, f)


def create_default_config(src_dir: bool = True) -> ProjectConfig:
    """Create default project configuration.

    Args:
        src_dir: Whether the project keeps its sources under src/
    """
    prefix = "src/" if src_dir else ""
    return ProjectConfig(
        registry=DEFAULT_REGISTRY_URL,
        aliases=Aliases(
            components=f"{prefix}components/ui",
            utils=f"{prefix}lib",
            hooks=f"{prefix}hooks",
        ),
    )


def get_registry_location(config: ProjectConfig | None) -> str:
    """Registry URL or directory, with LUMAN_REGISTRY_URL taking precedence."""
    from_env = os.environ.get(REGISTRY_ENV_VAR)
    if from_env:
        return from_env
    if config is None:
        return DEFAULT_REGISTRY_URL
    return config.registry


def _strip_alias_marker(alias: str) -> str:
    # "@/components/ui" and "~/components/ui" are import aliases for the project root
    for marker in ("@/", "~/"):
        if alias.startswith(marker):
            return alias[len(marker) :]
    return alias


def resolve_file_path(config: ProjectConfig, registry_path: str) -> str:
    """Map a registry-relative path to a project-relative path.

    ui/ maps to the components alias, lib/ to utils, hooks/ to hooks (falling
    back to components). Any other path is used as-is.

    Args:
        config: Project configuration with aliases
        registry_path: Path from the registry (e.g. "ui/button.tsx")

    Returns:
        POSIX-style path relative to the project root
    """
    aliases = config.aliases
    mapping = [
        ("ui/", aliases.components),
        ("lib/", aliases.utils),
        ("hooks/", aliases.hooks or aliases.components),
    ]
    for prefix, target_dir in mapping:
        if registry_path.startswith(prefix):
            relative = registry_path[len(prefix) :]
            return str(PurePosixPath(_strip_alias_marker(target_dir)) / relative)
    return registry_path
