"""Shared fixtures for luman-cli tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from luman_cli.io.config import create_default_config, save_project_config
from luman_cli.models.config import ProjectConfig


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config() -> ProjectConfig:
    """Default configuration: components in src/components/ui, utils in src/lib."""
    return create_default_config(src_dir=True)


@pytest.fixture
def project_dir(tmp_path: Path, config: ProjectConfig) -> Path:
    """Project directory with luman.toml written."""
    project = tmp_path / "project"
    project.mkdir()
    save_project_config(project, config)
    return project


@pytest.fixture(autouse=True)
def _no_registry_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LUMAN_REGISTRY_URL", raising=False)
