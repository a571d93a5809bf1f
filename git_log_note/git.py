"""Minimal utilities for invoking git commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, NamedTuple, Sequence

from .exceptions import GitCommandError

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    stdout: str
    returncode: int
    stderr: str = ""


CommandRunner = Callable[[Sequence[str], Path], CommandResult]


def run_git(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute git with an argument vector; no shell is involved."""

    command = ["git", *args]
    logger.debug("Running %s in %s", " ".join(command), cwd or Path.cwd())
    result = subprocess.run(
        command,
        cwd=str(cwd) if cwd else None,
        text=True,
        encoding="utf-8",
        errors="replace",
        capture_output=True,
    )
    if check and result.returncode != 0:
        raise GitCommandError(command, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result


def run_command(args: Sequence[str], cwd: Path) -> CommandResult:
    """Run ``git <args>`` inside ``cwd`` and report stdout plus exit status.

    A non-zero exit is reported in the result, not raised. Raises
    ``OSError`` when git or ``cwd`` is missing.
    """

    try:
        proc = run_git(args, cwd=cwd)
    except GitCommandError as exc:
        return CommandResult(stdout=exc.stdout, returncode=exc.returncode, stderr=exc.stderr)
    return CommandResult(stdout=proc.stdout, returncode=proc.returncode, stderr=proc.stderr)


__all__ = ["CommandResult", "CommandRunner", "run_git", "run_command"]
