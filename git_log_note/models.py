"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Repository:
    """A registered git working copy."""

    name: str
    path: str
    all_branches: bool = False


@dataclass
class Settings:
    """Everything persisted between sessions."""

    repositories: list[Repository] = field(default_factory=list)
    last_selected_names: list[str] = field(default_factory=list)

    def names(self) -> list[str]:
        return [repo.name for repo in self.repositories]


@dataclass
class RepositoryToggle:
    """Form state for one repository in the selection prompt."""

    repository: Repository
    selected: bool
    all_branches: bool

    @property
    def name(self) -> str:
        return self.repository.name


@dataclass(frozen=True)
class SelectionEntry:
    """A repository chosen for a single insertion."""

    repository: Repository
    all_branches: bool

    @property
    def name(self) -> str:
        return self.repository.name

    @property
    def path(self) -> str:
        return self.repository.path


@dataclass(frozen=True)
class SelectionResult:
    entries: tuple[SelectionEntry, ...] = ()
    cancelled: bool = False

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
