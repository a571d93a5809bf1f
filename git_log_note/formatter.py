"""Query git for a day of commits and render it as Obsidian callouts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .git import CommandRunner, run_command
from .models import SelectionEntry

logger = logging.getLogger(__name__)

NO_COMMITS_MESSAGE = "No commits found for the specified date."
QUERY_ERROR_MESSAGE = "Error: Unable to retrieve git log."
ALL_BRANCHES_SUFFIX = " (all branches)"

_FORMAT = "%h %s"
_FORMAT_WITH_REFS = "%h %s%d"


def build_log_args(date: str, all_branches: bool) -> list[str]:
    args = [
        "log",
        "--oneline",
        "--no-merges",
        "--date=short",
        f"--format={_FORMAT_WITH_REFS if all_branches else _FORMAT}",
        f"--after={date} 00:00:00",
        f"--before={date} 23:59:59",
    ]
    if all_branches:
        args.append("--all")
    return args


def query_log(
    date: str,
    repo_path: str,
    all_branches: bool = False,
    runner: CommandRunner = run_command,
) -> str:
    """Return one ``<hash> <subject>`` line per commit made on ``date``.

    Failures never propagate: they are logged and replaced by
    :data:`QUERY_ERROR_MESSAGE` so the other repositories still render.
    """

    cwd = Path(repo_path).expanduser()
    try:
        result = runner(build_log_args(date, all_branches), cwd)
    except (OSError, ValueError) as exc:
        logger.error("Error executing git log in %s: %s", cwd, exc)
        return QUERY_ERROR_MESSAGE
    if result.returncode != 0:
        logger.error(
            "Error executing git log in %s (exit %d): %s",
            cwd,
            result.returncode,
            result.stderr.strip(),
        )
        return QUERY_ERROR_MESSAGE
    output = result.stdout.strip()
    return output or NO_COMMITS_MESSAGE


def format_block(repo_name: str, all_branches: bool, log_text: str) -> str:
    header = f"`git log` for {repo_name}"
    if all_branches:
        header += ALL_BRANCHES_SUFFIX
    lines = [f">[!NOTE]- {header}", "> ```"]
    lines.extend(f"> {line}" for line in log_text.split("\n"))
    lines.append("> ```")
    return "\n".join(lines) + "\n"


def format_all(
    date: str,
    selection: Iterable[SelectionEntry],
    runner: CommandRunner = run_command,
) -> str:
    blocks: list[str] = []
    for entry in selection:
        log_text = query_log(date, entry.path, entry.all_branches, runner=runner)
        blocks.append(format_block(entry.name, entry.all_branches, log_text) + "\n")
    return "".join(blocks)


__all__ = [
    "NO_COMMITS_MESSAGE",
    "QUERY_ERROR_MESSAGE",
    "ALL_BRANCHES_SUFFIX",
    "build_log_args",
    "query_log",
    "format_block",
    "format_all",
]
