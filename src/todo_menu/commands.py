"""Command tokens and menu labels for the interactive loop."""

from enum import Enum
from typing import Dict, Optional

from rich.console import Console


class Command(Enum):
    """User intents handled by one loop iteration."""
    ADD = "add"
    PRINT = "print"
    CHECK = "check"
    REMOVE = "remove"
    EXIT = "exit"
    CONTINUE = "continue"


# Check and uncheck share one toggle command.
COMMAND_ALIASES: Dict[str, Command] = {
    "add": Command.ADD,
    "a": Command.ADD,
    "check": Command.CHECK,
    "c": Command.CHECK,
    "uncheck": Command.CHECK,
    "u": Command.CHECK,
    "remove": Command.REMOVE,
    "r": Command.REMOVE,
    "print": Command.PRINT,
    "p": Command.PRINT,
    "exit": Command.EXIT,
    "e": Command.EXIT,
}

# Menu order shown to the user.
USER_COMMANDS = (
    Command.ADD,
    Command.CHECK,
    Command.REMOVE,
    Command.PRINT,
    Command.EXIT,
)

_COMMAND_LABELS = {
    Command.ADD: "(a)dd",
    Command.PRINT: "(p)rint",
    Command.EXIT: "(e)xit",
    Command.CHECK: "(c)heck/uncheck",
    Command.REMOVE: "(r)emove",
}


def parse_command(token: Optional[str], console: Optional[Console] = None) -> Command:
    """Resolve a raw command token to a Command.

    Args:
        token: The token typed by the user, or None when there was no input.
        console: Where to report unrecognized tokens.

    Returns:
        The matching Command; CONTINUE for absent or unknown tokens.
    """
    if token is None:
        return Command.CONTINUE

    command = COMMAND_ALIASES.get(token.strip())
    if command is None:
        if console is not None:
            console.print(
                f"No Command called {token.strip()}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        return Command.CONTINUE
    return command


def command_label(command: Command) -> str:
    """Get the menu label for a user-facing command."""
    try:
        return _COMMAND_LABELS[command]
    except KeyError:
        raise ValueError(f"{command.name} has no menu entry") from None


def format_menu() -> str:
    """Build the OPTIONS block listing every user command."""
    lines = [f" - {command_label(command)}" for command in USER_COMMANDS]
    return "OPTIONS: \n" + "\n".join(lines)
