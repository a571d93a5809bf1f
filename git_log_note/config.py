"""Resolve runtime configuration: settings location and logging."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer

APP_NAME = "git-log-note"
CONFIG_ENV_VAR = "GIT_LOG_NOTE_CONFIG"
SETTINGS_FILENAME = "settings.json"


def resolve_settings_path(override: Path | None = None) -> Path:
    """Pick the settings file: explicit option, then env var, then app dir."""

    if override:
        return override.expanduser()
    raw = os.environ.get(CONFIG_ENV_VAR)
    if raw:
        return Path(raw).expanduser()
    return Path(typer.get_app_dir(APP_NAME)) / SETTINGS_FILENAME


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)


__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "SETTINGS_FILENAME",
    "resolve_settings_path",
    "configure_logging",
]
