"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Sequence

from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from .dates import is_daily_note
from .exceptions import UserAbort, ValidationError
from .models import RepositoryToggle


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise ValidationError(
            "Interactive mode requires a TTY. Provide the missing arguments to run non-interactively."
        )


def text_input(message: str, default: str | None = None) -> str:
    _ensure_tty()
    try:
        return inquirer.text(message=message, default=default or "").execute().strip()
    except KeyboardInterrupt as exc:  # pragma: no cover - user cancel
        raise UserAbort("User cancelled the prompt.") from exc


def prompt_date() -> str | None:
    """Ask for a ``YYYY-MM-DD`` date; ``None`` when cancelled or left blank."""

    _ensure_tty()
    try:
        answer = inquirer.text(
            message="Enter date (YYYY-MM-DD)",
            validate=lambda value: not value.strip() or is_daily_note(value.strip()),
            invalid_message="Use the YYYY-MM-DD format.",
        ).execute()
    except KeyboardInterrupt:  # pragma: no cover - user cancel
        return None
    return answer.strip() or None


def prompt_repositories(toggles: list[RepositoryToggle]) -> Sequence[RepositoryToggle] | None:
    """Checkbox form over the registered repositories.

    The first list picks repositories, the second sets "all branches" for
    the picked ones. Returns ``None`` on Ctrl-C.
    """

    if not toggles:
        return toggles
    _ensure_tty()
    try:
        chosen = inquirer.checkbox(
            message="Select repositories",
            choices=build_repository_choices(toggles),
            instruction="(space to toggle, enter to insert)",
        ).execute()
        picked_names = set(chosen)
        picked = [toggle for toggle in toggles if toggle.name in picked_names]
        wide: list[str] = []
        if picked:
            wide = inquirer.checkbox(
                message="Include all branches for",
                choices=build_branch_scope_choices(picked),
                instruction="(space to toggle, enter to confirm)",
            ).execute()
    except KeyboardInterrupt:  # pragma: no cover - user cancel
        return None
    return apply_choices(toggles, chosen, wide)


def build_repository_choices(toggles: Sequence[RepositoryToggle]) -> list[Choice]:
    return [
        Choice(value=toggle.name, name=f"{toggle.name} · {toggle.repository.path}", enabled=toggle.selected)
        for toggle in toggles
    ]


def build_branch_scope_choices(toggles: Sequence[RepositoryToggle]) -> list[Choice]:
    return [Choice(value=toggle.name, name=toggle.name, enabled=toggle.all_branches) for toggle in toggles]


def apply_choices(
    toggles: list[RepositoryToggle],
    selected_names: Sequence[str],
    all_branch_names: Sequence[str],
) -> list[RepositoryToggle]:
    """Fold checkbox answers back into the toggles.

    Repositories left out of the second prompt keep their previous flag.
    """

    selected = set(selected_names)
    wide = set(all_branch_names)
    for toggle in toggles:
        toggle.selected = toggle.name in selected
        if toggle.selected:
            toggle.all_branches = toggle.name in wide
    return toggles


__all__ = [
    "text_input",
    "prompt_date",
    "prompt_repositories",
    "build_repository_choices",
    "build_branch_scope_choices",
    "apply_choices",
]
