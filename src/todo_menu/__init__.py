"""Todo Menu - An interactive, menu-driven command-line todo list."""

__version__ = "0.1.0"
__author__ = "Todo Menu Team"

from .todo import Item
from .commands import Command, parse_command
from .storage import Storage
from .exceptions import TodoMenuError, StorageError

__all__ = [
    "Item",
    "Command",
    "parse_command",
    "Storage",
    "TodoMenuError",
    "StorageError",
    "__version__",
]
