"""Command-line interface for Todo Menu."""

import logging
import sys
from pathlib import Path
from typing import Optional
import click
from rich.console import Console
from rich.text import Text

from . import __version__
from .config import load_config
from .exceptions import StorageError
from .session import TodoSession
from .storage import Storage


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: int):
    """Send log records to stderr at the given level."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("todo_menu").setLevel(level)


@click.command()
@click.argument("command", required=False)
@click.option("--file", "-f", "data_file", type=click.Path(dir_okay=False),
              help="Todo file (default: todo.json)")
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--no-clear", is_flag=True, help="Do not clear the screen between commands")
@click.option("--strict", is_flag=True, help="Fail on a corrupt todo file instead of starting empty")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(version=__version__)
def main(command: Optional[str], data_file, config, no_clear, strict, verbose):
    """Todo Menu - an interactive todo list.

    COMMAND is the first command to run: (a)dd, (c)heck/uncheck, (r)emove,
    (p)rint or (e)xit. Without it the menu is shown straight away.
    """
    cfg = load_config(Path(config) if config else None)
    configure_logging(logging.DEBUG if verbose else cfg.get_log_level())

    if data_file:
        cfg.data_file = data_file
    if no_clear:
        cfg.clear_screen = False
    if strict:
        cfg.strict_load = True

    console = Console(no_color=cfg.no_color)
    storage = Storage(cfg.get_data_path(), strict=cfg.strict_load)
    session = TodoSession(storage, console=console, clear_screen=cfg.clear_screen)

    logger.debug(f"Using todo file {storage.path}")
    try:
        session.run(command)
    except StorageError as e:
        console.print(Text(f"Error: {e}", style="red"))
        sys.exit(2)


if __name__ == "__main__":
    main()
