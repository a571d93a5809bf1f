"""Pick which repositories go into a single insertion."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from .models import Repository, RepositoryToggle, SelectionEntry, SelectionResult

logger = logging.getLogger(__name__)

SelectionPrompt = Callable[[list[RepositoryToggle]], Optional[Sequence[RepositoryToggle]]]


def build_toggles(
    repositories: Sequence[Repository],
    last_selected_names: Iterable[str],
) -> list[RepositoryToggle]:
    """Initial form state: pre-check last run's picks and stored branch flags."""

    previous = set(last_selected_names)
    return [
        RepositoryToggle(
            repository=repo,
            selected=repo.name in previous,
            all_branches=repo.all_branches,
        )
        for repo in repositories
    ]


def select(
    repositories: Sequence[Repository],
    last_selected_names: Iterable[str],
    prompt_fn: SelectionPrompt,
) -> SelectionResult:
    """Ask the user which repositories to include.

    The prompt gets one toggle per repository and returns the submitted
    toggles, or ``None`` when the user backs out. The result keeps the
    order of ``repositories``. Each chosen repository's ``all_branches``
    field is updated to the submitted value so the choice sticks.
    """

    toggles = build_toggles(repositories, last_selected_names)
    submitted = prompt_fn(toggles)
    if submitted is None:
        logger.debug("Repository selection cancelled")
        return SelectionResult(cancelled=True)

    final_state = {id(toggle.repository): toggle for toggle in submitted}
    entries: list[SelectionEntry] = []
    for repo in repositories:
        toggle = final_state.get(id(repo))
        if toggle is None or not toggle.selected:
            continue
        repo.all_branches = toggle.all_branches
        entries.append(SelectionEntry(repository=repo, all_branches=toggle.all_branches))
    logger.debug("Selected repositories: %s", ", ".join(e.name for e in entries) or "(none)")
    return SelectionResult(entries=tuple(entries))


__all__ = ["SelectionPrompt", "build_toggles", "select"]
