"""Custom error hierarchy for git-log-note."""

from __future__ import annotations


class GitLogNoteError(RuntimeError):
    """Base error for the CLI."""


class SettingsError(GitLogNoteError):
    """Raised when the settings file cannot be read or written."""


class DocumentError(GitLogNoteError):
    """Raised when a note cannot be read or written."""


class GitCommandError(GitLogNoteError):
    """Raised when an underlying git command fails."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


class ValidationError(GitLogNoteError):
    """Raised when user input fails validation."""


class UserAbort(GitLogNoteError):
    """Raised when the user cancels an interactive flow."""


__all__ = [
    "GitLogNoteError",
    "SettingsError",
    "DocumentError",
    "GitCommandError",
    "ValidationError",
    "UserAbort",
]
