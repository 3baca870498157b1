"""Tests for the click entry point."""

import json

import pytest
from click.testing import CliRunner

from todo_menu.cli import main


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("TODO_MENU_CONFIG", str(tmp_path / "config.yaml"))
    monkeypatch.chdir(tmp_path)
    return CliRunner()


class TestCli:
    """End-to-end runs through the command line."""

    def test_add_from_argument(self, runner, tmp_path):
        result = runner.invoke(main, ["a"], input="Milk\ne\n")

        assert result.exit_code == 1
        assert "[ ] Milk" in result.output
        assert json.loads((tmp_path / "todo.json").read_text()) == [
            {"name": "Milk", "completed": False}
        ]

    def test_no_argument_shows_menu(self, runner):
        result = runner.invoke(main, [], input="e\n")

        assert result.exit_code == 1
        assert "OPTIONS:" in result.output

    def test_unknown_argument(self, runner):
        result = runner.invoke(main, ["zz"], input="e\n")

        assert "No Command called zz" in result.output

    def test_custom_file(self, runner, tmp_path):
        result = runner.invoke(main, ["--file", "work.json", "add"], input="Report\ne\n")

        assert result.exit_code == 1
        assert json.loads((tmp_path / "work.json").read_text())[0]["name"] == "Report"
        assert not (tmp_path / "todo.json").exists()

    def test_corrupt_file_starts_empty(self, runner, tmp_path):
        (tmp_path / "todo.json").write_text("{broken")

        result = runner.invoke(main, ["p"], input="e\n")

        assert "[Empty Todo List]" in result.output
        assert json.loads((tmp_path / "todo.json").read_text()) == []

    def test_strict_corrupt_file_fails(self, runner, tmp_path):
        (tmp_path / "todo.json").write_text("{broken")

        result = runner.invoke(main, ["--strict", "p"], input="e\n")

        assert result.exit_code == 2
        assert "Error: Corrupt todo file" in result.output
        assert (tmp_path / "todo.json").read_text() == "{broken"
