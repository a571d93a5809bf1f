"""JSON-backed persistence for the repository list and last selection."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from .exceptions import SettingsError, ValidationError
from .models import Repository, Settings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "repos": [],
    "lastSelectedRepos": [],
}


class RepositoryStore:
    """Owns the in-memory :class:`Settings` and the file they live in.

    Mutators only touch memory; callers follow each one with :meth:`save`.
    """

    def __init__(self, path: Path, settings: Settings | None = None):
        self.path = path
        self.settings = settings or Settings()

    def load(self) -> Settings:
        data = dict(DEFAULT_SETTINGS)
        if self.path.exists():
            try:
                raw = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError) as exc:
                raise SettingsError(f"Unable to read settings file {self.path}: {exc}") from exc
            except json.JSONDecodeError as exc:
                raise SettingsError(f"Invalid JSON in settings file {self.path}: {exc}") from exc
            if not isinstance(raw, dict):
                raise SettingsError(f"Settings file {self.path} must contain a JSON object.")
            data.update(raw)
        else:
            logger.debug("No settings file at %s; using defaults", self.path)
        self.settings = settings_from_dict(data)
        return self.settings

    def save(self, settings: Settings | None = None) -> None:
        if settings is not None:
            self.settings = settings
        payload = json.dumps(settings_to_dict(self.settings), indent=2) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Unable to write settings file {self.path}: {exc}") from exc
        logger.debug("Saved %d repositories to %s", len(self.settings.repositories), self.path)

    @property
    def repositories(self) -> list[Repository]:
        return self.settings.repositories

    def add_repository(self, name: str, path: str) -> Repository:
        name = validate_name(name)
        path = validate_path(path)
        if name in self.settings.names():
            raise ValidationError(f"A repository named {name!r} already exists.")
        repo = Repository(name=name, path=path)
        self.settings.repositories.append(repo)
        return repo

    def remove_repository(self, index: int) -> Repository:
        self._check_index(index)
        return self.settings.repositories.pop(index)

    def set_all_branches(self, index: int, value: bool) -> None:
        self._check_index(index)
        self.settings.repositories[index].all_branches = bool(value)

    def record_last_selected(self, names: Iterable[str]) -> None:
        self.settings.last_selected_names = list(names)

    def index_of(self, name: str) -> int:
        for index, repo in enumerate(self.settings.repositories):
            if repo.name == name:
                return index
        raise ValidationError(f"No repository named {name!r}.")

    def _check_index(self, index: int) -> None:
        count = len(self.settings.repositories)
        if not 0 <= index < count:
            raise ValidationError(f"Repository index {index} is out of range (have {count}).")


def validate_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Repository name cannot be empty.")
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in name):
        raise ValidationError("Repository name cannot contain control characters.")
    return name


def validate_path(path: str) -> str:
    path = (path or "").strip()
    if not path:
        raise ValidationError("Repository path cannot be empty.")
    if "\x00" in path:
        raise ValidationError("Repository path cannot contain NUL bytes.")
    return path


def settings_from_dict(data: dict[str, Any]) -> Settings:
    repos_raw = data.get("repos") or []
    if not isinstance(repos_raw, list):
        raise SettingsError("'repos' must be a list.")
    repositories: list[Repository] = []
    for item in repos_raw:
        if not isinstance(item, dict) or "name" not in item or "path" not in item:
            raise SettingsError(f"Malformed repository entry: {item!r}")
        repositories.append(
            Repository(
                name=str(item["name"]),
                path=str(item["path"]),
                all_branches=bool(item.get("allBranches", False)),
            )
        )
    last_selected = data.get("lastSelectedRepos") or []
    if not isinstance(last_selected, list):
        raise SettingsError("'lastSelectedRepos' must be a list.")
    return Settings(repositories=repositories, last_selected_names=[str(n) for n in last_selected])


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    return {
        "repos": [
            {"name": repo.name, "path": repo.path, "allBranches": repo.all_branches}
            for repo in settings.repositories
        ],
        "lastSelectedRepos": list(settings.last_selected_names),
    }


__all__ = [
    "DEFAULT_SETTINGS",
    "RepositoryStore",
    "settings_from_dict",
    "settings_to_dict",
    "validate_name",
    "validate_path",
]
