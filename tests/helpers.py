"""Shared fakes for the test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from git_log_note.git import CommandResult


class FakeRunner:
    """Stands in for ``run_command``; answers by working directory."""

    def __init__(self, outputs: dict[str, CommandResult | Exception] | None = None, default: str = ""):
        self.outputs = outputs or {}
        self.default = default
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, args: Sequence[str], cwd: Path) -> CommandResult:
        self.calls.append((list(args), cwd))
        answer = self.outputs.get(str(cwd), CommandResult(stdout=self.default, returncode=0))
        if isinstance(answer, Exception):
            raise answer
        return answer


def submit_as_is(toggles):
    return toggles


def cancel(toggles):
    return None


def select_all(toggles):
    for toggle in toggles:
        toggle.selected = True
    return toggles
