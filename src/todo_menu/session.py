"""Interactive command loop for Todo Menu.

Each iteration reloads the list from storage, applies one command, and
writes the list back before asking for the next command.
"""

import logging
import sys
from typing import Callable, List, Optional

from rich.console import Console
from rich.text import Text

from .commands import Command, parse_command, format_menu
from .storage import Storage
from .todo import Item


logger = logging.getLogger(__name__)

EMPTY_LIST_MARKER = "[Empty Todo List]"
EXIT_STATUS = 1


def format_item_line(item: Item, index: Optional[int] = None) -> Text:
    """Format an item for display, optionally prefixed by its position."""
    line = Text()
    if index is not None:
        line.append(f"{index} ", style="dim")
    line.append(item.render(), style="green" if item.completed else "")
    return line


class TodoSession:
    """Runs the read/dispatch/write loop against a Storage."""

    def __init__(
        self,
        storage: Storage,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[], str]] = None,
        clear_screen: bool = True,
    ):
        self.storage = storage
        self.console = console or Console()
        self._input = input_func or self.console.input
        self.clear_screen = clear_screen

    def run(self, initial_token: Optional[str] = None):
        """Run the loop until the user exits.

        Args:
            initial_token: Command token given on the command line, if any.
        """
        self._clear()
        command = parse_command(initial_token, self.console)
        while True:
            self.step(command)
            command = self.prompt_command()

    def step(self, command: Command) -> List[Item]:
        """Run one iteration: load, dispatch, save.

        Returns:
            The list as it was saved.
        """
        items = self.storage.load()
        self.process_command(command, items)
        self.storage.save(items)
        return items

    def process_command(self, command: Command, items: List[Item]):
        """Apply a command to the in-memory list."""
        logger.debug(f"Dispatching {command.name} on {len(items)} item(s)")
        self._clear()

        if command is Command.ADD:
            self.add_item(items)
            self.print_items(items)
        elif command is Command.CHECK:
            self.check_item(items)
            self.print_items(items)
        elif command is Command.REMOVE:
            self.remove_item(items)
            self.print_items(items)
        elif command is Command.PRINT:
            self.print_items(items)
        elif command is Command.EXIT:
            self.exit()

    def prompt_command(self) -> Command:
        """Show the menu and read the next command."""
        self._clear()
        self.console.print("Enter command: ")
        self.console.print(format_menu(), markup=False, highlight=False)
        self.console.print("\n")
        return parse_command(self.read_line(), self.console)

    def add_item(self, items: List[Item]):
        """Prompt for a name and append a new, unchecked item."""
        self.console.print("What's the Todo's name?")
        name = self.read_line()
        self.console.print("\n")
        items.append(Item(name=name))
        logger.debug(f"Added item {name!r}")
        self._clear()

    def check_item(self, items: List[Item]):
        """Toggle the completion state of a chosen item."""
        if not items:
            return

        index = self.select_index(items)
        items[index].toggle()
        logger.debug(f"Toggled item {index} to completed={items[index].completed}")
        self._clear()

    def remove_item(self, items: List[Item]):
        """Remove a chosen item."""
        if not items:
            return

        index = self.select_index(items)
        removed = items.pop(index)
        logger.debug(f"Removed item {index} ({removed.name!r})")
        self._clear()

    def select_index(self, items: List[Item]) -> int:
        """Ask for a zero-based index until a valid one is entered."""
        self.console.print("Which one?")
        self.print_items(items, show_index=True)

        index = parse_index(self.read_line(), len(items))
        while index is None:
            self.console.print("\nInvalid input. Try again")
            index = parse_index(self.read_line(), len(items))

        self.console.print("\n")
        return index

    def print_items(self, items: List[Item], show_index: bool = False):
        """Display the list, one checkbox line per item."""
        if not items:
            self.console.print(EMPTY_LIST_MARKER, markup=False, highlight=False, soft_wrap=True)

        for i, item in enumerate(items):
            self.console.print(format_item_line(item, i if show_index else None), soft_wrap=True)
        self.console.print()

    def read_line(self) -> str:
        """Read one line of user input; closed input exits the session."""
        try:
            line = self._input()
        except EOFError:
            logger.debug("Input closed, exiting")
            self.exit()
        return line.strip()

    def exit(self):
        """Terminate the process without saving."""
        sys.exit(EXIT_STATUS)

    def _clear(self):
        if self.clear_screen:
            self.console.clear()


def parse_index(text: str, length: int) -> Optional[int]:
    """Parse a list position, or None if it is not a valid index."""
    text = text.strip()
    if text.startswith("+"):
        text = text[1:]
    if not text.isdigit() or not text.isascii():
        return None
    index = int(text)
    if index >= length:
        return None
    return index
