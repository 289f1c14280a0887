"""Registry item models.

Field names follow the registry's camelCase JSON; Python code uses the
snake_case attribute names.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from luman_cli.models.semver import is_semver

ItemType = Literal["ui", "block", "page", "hook"]


class RegistryFile(BaseModel):
    """One file belonging to a registry item."""

    model_config = ConfigDict(frozen=True, extra="allow")

    path: str = Field(..., min_length=1)  # Registry-namespaced, e.g. "ui/button.tsx"
    type: str = "registry:ui"
    content: str | None = None  # Populated on fetch
    target: str | None = None


class ChangelogEntry(BaseModel):
    """A single release note for a registry item."""

    model_config = ConfigDict(frozen=True)

    version: str
    date: str
    changes: list[str] = Field(default_factory=list)


class RegistryItem(BaseModel):
    """A named, versioned unit of distributable code."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    name: str = Field(..., min_length=1)
    type: str = "ui"
    description: str | None = None
    files: list[RegistryFile] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list, alias="devDependencies")
    registry_dependencies: list[str] = Field(default_factory=list, alias="registryDependencies")
    version: str = "0.0.0"
    content_hash: str | None = Field(default=None, alias="contentHash")
    published_at: str | None = Field(default=None, alias="publishedAt")
    changelog: list[ChangelogEntry] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate version is MAJOR.MINOR.PATCH."""
        if not is_semver(v):
            raise ValueError(f"version must be MAJOR.MINOR.PATCH, got '{v}'")
        return v

    @field_validator("content_hash")
    @classmethod
    def validate_content_hash(cls, v: str | None) -> str | None:
        """Validate content hash is a 64 character hex digest."""
        if v is not None and len(v) != 64:
            raise ValueError("contentHash must be a 64 character SHA-256 hex digest")
        return v

    def changelog_for(self, version: str) -> ChangelogEntry | None:
        """Return the changelog entry for a version, if the registry published one."""
        for entry in self.changelog:
            if entry.version == version:
                return entry
        return None

    def to_wire(self) -> dict[str, object]:
        """Serialize back to the registry's JSON layout."""
        return self.model_dump(by_alias=True, exclude_none=True)
