"""The "Insert Git Log" command, independent of any terminal UI."""

from __future__ import annotations

import enum
import logging
from typing import Callable

from . import formatter, selector
from .dates import DatePrompt, resolve_date
from .document import Document
from .git import CommandRunner, run_command
from .selector import SelectionPrompt
from .store import RepositoryStore

logger = logging.getLogger(__name__)

NO_DATE_NOTICE = "No date provided. Git log not inserted."
NO_REPOSITORIES_NOTICE = "No repositories selected. Git log not inserted."


class InsertOutcome(enum.Enum):
    INSERTED = "inserted"
    NO_DATE = "no-date"
    NO_REPOSITORIES = "no-repositories"


def insert_git_log(
    document: Document,
    store: RepositoryStore,
    *,
    date: str | None = None,
    date_prompt: DatePrompt,
    repo_prompt: SelectionPrompt,
    notify: Callable[[str], None],
    runner: CommandRunner = run_command,
) -> InsertOutcome:
    """Resolve the date, pick repositories, and insert one callout per repository.

    An explicit ``date`` skips resolution. A submitted selection is
    persisted (last picks and branch flags) even when it is empty.
    Settings write failures propagate.
    """

    if date is None:
        date = resolve_date(document.name, date_prompt)
    if not date:
        notify(NO_DATE_NOTICE)
        return InsertOutcome.NO_DATE

    settings = store.settings
    result = selector.select(settings.repositories, settings.last_selected_names, repo_prompt)
    if not result.cancelled:
        store.record_last_selected(result.names())
        store.save()
    if not result:
        notify(NO_REPOSITORIES_NOTICE)
        return InsertOutcome.NO_REPOSITORIES

    logger.info("Building git log for %s across %d repositories", date, len(result))
    text = formatter.format_all(date, result, runner=runner)
    document.insert(text)
    return InsertOutcome.INSERTED


__all__ = ["InsertOutcome", "insert_git_log", "NO_DATE_NOTICE", "NO_REPOSITORIES_NOTICE"]
