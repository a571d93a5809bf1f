"""Tests for the Typer command surface."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from git_log_note.cli import app

from helpers import cancel, select_all, submit_as_is


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        self.config = self.root / "settings.json"
        self.runner = CliRunner()

    def invoke(self, *args: str):
        return self.runner.invoke(app, ["--config", str(self.config), *args])

    def saved(self) -> dict:
        return json.loads(self.config.read_text(encoding="utf-8"))

    def test_repo_add_ls_rm(self) -> None:
        self.assertEqual(self.invoke("repo", "add", "proj", "/repo").exit_code, 0)
        self.assertEqual(self.invoke("repo", "add", "other", "/other").exit_code, 0)

        listed = self.invoke("repo", "ls", "--json")
        self.assertEqual(listed.exit_code, 0)
        self.assertEqual(
            json.loads(listed.stdout),
            [
                {"name": "proj", "path": "/repo", "allBranches": False},
                {"name": "other", "path": "/other", "allBranches": False},
            ],
        )

        removed = self.invoke("repo", "rm", "proj")
        self.assertEqual(removed.exit_code, 0)
        self.assertEqual([r["name"] for r in self.saved()["repos"]], ["other"])

    def test_repo_ls_table(self) -> None:
        self.invoke("repo", "add", "proj", "/repo")

        result = self.invoke("repo", "ls")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("proj", result.output)
        self.assertIn("/repo", result.output)

    def test_duplicate_add_fails(self) -> None:
        self.invoke("repo", "add", "proj", "/repo")

        result = self.invoke("repo", "add", "proj", "/elsewhere")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("already exists", result.output)

    def test_rm_unknown_fails(self) -> None:
        result = self.invoke("repo", "rm", "ghost")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("No repository named", result.output)

    def test_add_without_tty_fails(self) -> None:
        result = self.invoke("repo", "add")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("TTY", result.output)

    def test_all_branches_toggle(self) -> None:
        self.invoke("repo", "add", "proj", "/repo")

        self.assertEqual(self.invoke("repo", "all-branches", "proj").exit_code, 0)
        self.assertTrue(self.saved()["repos"][0]["allBranches"])
        self.assertEqual(self.invoke("repo", "all-branches", "proj", "--off").exit_code, 0)
        self.assertFalse(self.saved()["repos"][0]["allBranches"])

    def test_corrupt_settings_fail_cleanly(self) -> None:
        self.config.write_text("[", encoding="utf-8")

        result = self.invoke("repo", "ls")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid JSON", result.output)

    def test_insert_into_daily_note(self) -> None:
        missing = self.root / "not-a-repo"
        self.invoke("repo", "add", "proj", str(missing))
        note = self.root / "2024-03-15.md"
        note.write_text("# 2024-03-15\n", encoding="utf-8")

        with mock.patch("git_log_note.interactive.prompt_repositories", side_effect=select_all):
            result = self.invoke("insert", str(note))

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            note.read_text(encoding="utf-8"),
            "# 2024-03-15\n"
            ">[!NOTE]- `git log` for proj\n> ```\n> Error: Unable to retrieve git log.\n> ```\n\n",
        )
        self.assertEqual(self.saved()["lastSelectedRepos"], ["proj"])

    def test_unreadable_note_fails_cleanly(self) -> None:
        self.invoke("repo", "add", "proj", str(self.root / "missing"))
        note = self.root / "2024-03-15.md"
        note.write_bytes(b"caf\xe9\n")

        with mock.patch("git_log_note.interactive.prompt_repositories", side_effect=select_all):
            result = self.invoke("insert", str(note))

        self.assertEqual(result.exit_code, 1)
        self.assertNotIsInstance(result.exception, UnicodeDecodeError)
        self.assertIn("Unable to read note", result.output)
        self.assertEqual(note.read_bytes(), b"caf\xe9\n")

    def test_insert_to_stdout(self) -> None:
        self.invoke("repo", "add", "proj", str(self.root / "missing"))
        note = self.root / "Standup.md"

        with mock.patch("git_log_note.interactive.prompt_repositories", side_effect=select_all):
            result = self.invoke("insert", str(note), "--date", "2024-03-15", "--stdout")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(">[!NOTE]- `git log` for proj\n> ```\n", result.output)
        self.assertFalse(note.exists())

    def test_insert_with_nothing_selected(self) -> None:
        self.invoke("repo", "add", "proj", "/repo")
        note = self.root / "2024-03-15.md"

        with mock.patch("git_log_note.interactive.prompt_repositories", side_effect=submit_as_is):
            result = self.invoke("insert", str(note))

        self.assertEqual(result.exit_code, 0)
        self.assertIn("No repositories selected. Git log not inserted.", result.output)
        self.assertFalse(note.exists())

    def test_insert_without_date_is_cancelled(self) -> None:
        self.invoke("repo", "add", "proj", "/repo")
        note = self.root / "Standup.md"

        with mock.patch("git_log_note.interactive.prompt_date", return_value=None), mock.patch(
            "git_log_note.interactive.prompt_repositories", side_effect=cancel
        ) as repo_prompt:
            result = self.invoke("insert", str(note))

        self.assertEqual(result.exit_code, 0)
        self.assertIn("No date provided. Git log not inserted.", result.output)
        repo_prompt.assert_not_called()
        self.assertFalse(note.exists())

    def test_insert_rejects_bad_date(self) -> None:
        result = self.invoke("insert", "note.md", "--date", "15/03/2024")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("YYYY-MM-DD", result.output)


if __name__ == "__main__":
    unittest.main()
