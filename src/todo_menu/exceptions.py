"""Exception types raised by Todo Menu."""

from typing import Optional
from pathlib import Path


class TodoMenuError(Exception):
    """Base class for Todo Menu errors."""


class StorageError(TodoMenuError):
    """Raised when the todo file cannot be read or written."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)
