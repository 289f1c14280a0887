"""Installation manifest models for .luman/manifest.json."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MANIFEST_SCHEMA_VERSION = 1


class ManifestEntry(BaseModel):
    """Local record of one installed component."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    version: str
    content_hash: str = Field(..., alias="contentHash")
    installed_at: datetime = Field(..., alias="installedAt")
    customized: bool
    files: list[str]  # Project-relative paths written by the installer


class Manifest(BaseModel):
    """The full local installation record.

    Mutations return a new Manifest; callers persist it with write_manifest().
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    schema_version: Literal[1] = Field(..., alias="schemaVersion")
    installed_at: datetime = Field(..., alias="installedAt")
    cli_version: str = Field(..., alias="cliVersion")
    components: dict[str, ManifestEntry] = Field(default_factory=dict)

    def with_component(self, name: str, entry: ManifestEntry) -> "Manifest":
        """Return new manifest with the entry inserted or replaced."""
        return self.model_copy(update={"components": {**self.components, name: entry}})

    def without_component(self, name: str) -> "Manifest":
        """Return new manifest without the named entry."""
        remaining = {k: v for k, v in self.components.items() if k != name}
        return self.model_copy(update={"components": remaining})

    def to_json_dict(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)
