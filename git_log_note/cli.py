"""Typer-based CLI for git-log-note."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from . import __version__, interactive, render
from .config import configure_logging, resolve_settings_path
from .dates import is_daily_note
from .document import NoteDocument, StdoutDocument
from .exceptions import GitLogNoteError
from .store import RepositoryStore, settings_to_dict
from .workflow import InsertOutcome, insert_git_log

app = typer.Typer(
    help="Insert a day's git commits from your repositories into a Markdown note",
    add_completion=False,
    no_args_is_help=True,
)
repo_app = typer.Typer(help="Manage the repositories offered for insertion", no_args_is_help=True)
app.add_typer(repo_app, name="repo")


@dataclass(slots=True)
class AppState:
    store: RepositoryStore


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-log-note {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings file to use (defaults to $GIT_LOG_NOTE_CONFIG or the user config dir).",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-log-note version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    configure_logging(verbose)
    store = RepositoryStore(resolve_settings_path(config))
    try:
        store.load()
    except GitLogNoteError as exc:
        _fail(str(exc))
    ctx.obj = AppState(store=store)


def _require_state(ctx: typer.Context) -> AppState:
    state = ctx.find_root().obj
    if not isinstance(state, AppState):  # pragma: no cover
        raise typer.Exit(1)
    return state


@app.command(help="Insert the git log for a day into a note")
def insert(
    ctx: typer.Context,
    note: Path = typer.Argument(
        ...,
        help="Markdown note to insert into. A YYYY-MM-DD file name supplies the date.",
        dir_okay=False,
    ),
    date: Optional[str] = typer.Option(
        None,
        "--date",
        "-d",
        help="Date to report (YYYY-MM-DD). Skips the note name and the prompt.",
    ),
    line: Optional[int] = typer.Option(
        None,
        "--line",
        "-l",
        min=1,
        help="Insert before this 1-based line instead of appending.",
    ),
    stdout: bool = typer.Option(False, "--stdout", help="Print the digest instead of editing the note."),
) -> None:
    state = _require_state(ctx)
    if date is not None and not is_daily_note(date):
        _fail(f"--date must look like YYYY-MM-DD (got {date!r}).")
    if not state.store.repositories:
        render.info("No repositories registered. Add one with `git-log-note repo add NAME PATH`.")
    try:
        if stdout:
            document = StdoutDocument(name=note.stem)
        else:
            document = NoteDocument(path=note.expanduser(), line=line)
        outcome = insert_git_log(
            document,
            state.store,
            date=date,
            date_prompt=interactive.prompt_date,
            repo_prompt=interactive.prompt_repositories,
            notify=render.warning,
        )
    except GitLogNoteError as exc:
        _fail(str(exc))
    if outcome is InsertOutcome.INSERTED and not stdout:
        render.success(f"Inserted git log into {note}")


@repo_app.command("add", help="Register a repository")
def repo_add(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Unique display name."),
    path: Optional[str] = typer.Argument(None, help="Path to the git working copy."),
) -> None:
    state = _require_state(ctx)
    try:
        name = name or interactive.text_input("Repository name")
        path = path or interactive.text_input("Repository path")
        repo = state.store.add_repository(name, path)
        state.store.save()
    except GitLogNoteError as exc:
        _fail(str(exc))
    render.success(f"Added {repo.name} ({repo.path})")


@repo_app.command("rm", help="Delete a repository")
def repo_rm(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the repository to delete."),
) -> None:
    state = _require_state(ctx)
    try:
        removed = state.store.remove_repository(state.store.index_of(name))
        state.store.save()
    except GitLogNoteError as exc:
        _fail(str(exc))
    render.success(f"Removed {removed.name}")


@repo_app.command("ls", help="List registered repositories")
def repo_ls(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Output JSON for scripting."),
) -> None:
    state = _require_state(ctx)
    if as_json:
        typer.echo(json.dumps(settings_to_dict(state.store.settings)["repos"], indent=2))
        return
    render.show_repositories(state.store.settings)


@repo_app.command("all-branches", help="Set whether a repository's log covers every branch")
def repo_all_branches(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the repository."),
    enabled: bool = typer.Option(True, "--on/--off", help="Search all branches, or only the current one."),
) -> None:
    state = _require_state(ctx)
    try:
        state.store.set_all_branches(state.store.index_of(name), enabled)
        state.store.save()
    except GitLogNoteError as exc:
        _fail(str(exc))
    scope = "all branches" if enabled else "the current branch"
    render.success(f"{name} now logs {scope}")


def _fail(message: str, code: int = 1) -> None:
    render.error(message)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
