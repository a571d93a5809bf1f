"""Notes that the git log digest is inserted into."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import typer

from .exceptions import DocumentError, ValidationError

logger = logging.getLogger(__name__)


class Document(Protocol):
    @property
    def name(self) -> str: ...

    def insert(self, text: str) -> None: ...


@dataclass
class NoteDocument:
    """A Markdown note on disk.

    ``line`` is the 1-based line the text is inserted before; ``None``
    appends at the end. Line numbers past the end also append.
    """

    path: Path
    line: int | None = None

    def __post_init__(self) -> None:
        if self.line is not None and self.line < 1:
            raise ValidationError(f"Line numbers start at 1 (got {self.line}).")

    @property
    def name(self) -> str:
        return self.path.stem

    def insert(self, text: str) -> None:
        try:
            existing = self.path.read_text(encoding="utf-8") if self.path.exists() else ""
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentError(f"Unable to read note {self.path}: {exc}") from exc
        lines = existing.splitlines(keepends=True)
        if self.line is None or self.line > len(lines):
            if existing and not existing.endswith("\n"):
                existing += "\n"
            updated = existing + text
        else:
            index = self.line - 1
            updated = "".join(lines[:index]) + text + "".join(lines[index:])
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(updated, encoding="utf-8")
        except OSError as exc:
            raise DocumentError(f"Unable to write note {self.path}: {exc}") from exc
        logger.debug("Inserted %d characters into %s", len(text), self.path)


@dataclass
class StdoutDocument:
    """Prints the digest instead of editing a file."""

    name: str

    def insert(self, text: str) -> None:
        typer.echo(text, nl=False)


__all__ = ["Document", "NoteDocument", "StdoutDocument"]
