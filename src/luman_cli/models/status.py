"""Status classification result types."""

from dataclasses import dataclass
from typing import Literal

FileState = Literal["ok", "modified", "missing"]
ComponentState = Literal["untracked", "customized", "outdated", "unchanged"]


@dataclass(frozen=True)
class Untracked:
    """Component name has no manifest entry."""

    state: Literal["untracked"] = "untracked"


@dataclass(frozen=True)
class Customized:
    """Local files diverge from the hash recorded at install time, or are gone."""

    version: str
    state: Literal["customized"] = "customized"


@dataclass(frozen=True)
class Outdated:
    """Local files are pristine but the registry publishes another version."""

    installed_version: str
    latest_version: str
    state: Literal["outdated"] = "outdated"


@dataclass(frozen=True)
class Unchanged:
    """Local files are pristine and no newer version is known."""

    version: str
    state: Literal["unchanged"] = "unchanged"


ComponentStatus = Untracked | Customized | Outdated | Unchanged


@dataclass(frozen=True)
class FileStatus:
    """Status of one recorded file."""

    path: str
    status: FileState


@dataclass(frozen=True)
class StatusResult:
    """Classification of one component, with per-file detail."""

    component: str
    status: ComponentStatus
    files: list[FileStatus]

    @property
    def state(self) -> ComponentState:
        return self.status.state

    @property
    def missing_files(self) -> list[FileStatus]:
        return [f for f in self.files if f.status == "missing"]

    @property
    def modified_files(self) -> list[FileStatus]:
        return [f for f in self.files if f.status == "modified"]
