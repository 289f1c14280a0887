"""Project configuration models for luman.toml."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_REGISTRY_URL = "https://ui.luman.dev/registry"


class Aliases(BaseModel):
    """Target directories for registry-relative paths."""

    model_config = ConfigDict(frozen=True)

    components: str = Field(..., min_length=1)
    utils: str = Field(..., min_length=1)
    hooks: str | None = None

    @field_validator("hooks")
    @classmethod
    def validate_hooks(cls, v: str | None) -> str | None:
        """Validate hooks alias is non-empty when given."""
        if v is not None and not v.strip():
            raise ValueError("hooks alias cannot be empty")
        return v


class ProjectConfig(BaseModel):
    """Project configuration from luman.toml."""

    model_config = ConfigDict(frozen=True)

    registry: str = DEFAULT_REGISTRY_URL
    aliases: Aliases

    def with_registry(self, registry: str) -> "ProjectConfig":
        """Return new config pointing at another registry."""
        return self.model_copy(update={"registry": registry})
