"""Pytest configuration and shared fixtures."""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from todo_menu.session import TodoSession
from todo_menu.storage import Storage


class ScriptedInput:
    """Feeds prepared lines to the session, then behaves like closed stdin."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def todo_path(tmp_path):
    """Location of a fresh todo file."""
    return tmp_path / "todo.json"


@pytest.fixture
def storage(todo_path):
    return Storage(todo_path)


@pytest.fixture
def console():
    """Console that records output instead of writing to a terminal."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def make_session(storage, console):
    """Build a session whose input comes from the given lines."""
    def factory(*lines):
        scripted = ScriptedInput(lines)
        session = TodoSession(storage, console=console, input_func=scripted)
        return session, scripted
    return factory
