"""Resolve the date a git log digest is built for."""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

logger = logging.getLogger(__name__)

_DAILY_NOTE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DatePrompt = Callable[[], Optional[str]]


def is_daily_note(file_name: str | None) -> bool:
    """Return True when the note title is exactly ``YYYY-MM-DD``.

    Only the shape is checked, so ``2024-13-99`` still counts.
    """

    if file_name is None:
        return False
    return _DAILY_NOTE_RE.fullmatch(file_name) is not None


def extract_date(file_name: str | None) -> str | None:
    if not is_daily_note(file_name):
        return None
    return file_name


def resolve_date(file_name: str | None, prompt_fn: DatePrompt) -> str | None:
    """Use the daily-note date when there is one, otherwise ask the user.

    Blank answers and cancellation both come back as ``None``.
    """

    date = extract_date(file_name)
    if date is not None:
        logger.debug("Using date %s from note name", date)
        return date
    logger.debug("Note %r is not a daily note; prompting for a date", file_name)
    answer = prompt_fn()
    if answer is None:
        return None
    answer = answer.strip()
    return answer or None


__all__ = ["is_daily_note", "extract_date", "resolve_date", "DatePrompt"]
