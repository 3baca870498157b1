"""Storage layer for Todo Menu using a single JSON file."""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from .todo import Item
from .exceptions import StorageError


logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "todo.json"


class TodoJsonFormat:
    """Handles conversion between Item lists and the JSON file format."""

    @staticmethod
    def dumps(items: Sequence[Item]) -> str:
        """Serialize items to a JSON array of ``{name, completed}`` records."""
        return json.dumps(
            [item.to_dict() for item in items],
            ensure_ascii=False,
            separators=(",", ":"),
        )

    @staticmethod
    def loads(content: str) -> List[Item]:
        """Parse a JSON array back into Items.

        Raises:
            ValueError: If the content is not valid JSON or not an array of
                item records.
        """
        data = json.loads(content)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
        return [Item.from_dict(record) for record in data]


class Storage:
    """File-based storage for the todo list.

    The whole list is read on every ``load`` and rewritten on every ``save``;
    no file handle is held between calls.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_FILE_NAME, strict: bool = False):
        """Initialize the store.

        Args:
            path: Location of the JSON file.
            strict: If True, a corrupt file raises ``StorageError``.
                    If False, it is logged and treated as an empty list.
        """
        self.path = Path(path)
        self.strict = strict

    def load(self) -> List[Item]:
        """Load the todo list, or an empty list if there is none."""
        if not self.path.exists():
            logger.debug(f"No todo file at {self.path}, starting empty")
            return []

        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except OSError as e:
            if self.strict:
                raise StorageError(f"Could not read {self.path}: {e}", self.path) from e
            logger.warning(f"Could not read {self.path}, using an empty list: {e}")
            return []

        # UnicodeDecodeError is a ValueError; deep nesting overflows the JSON decoder
        try:
            content = raw.decode("utf-8")
            if not content.strip():
                return []
            items = TodoJsonFormat.loads(content)
        except (ValueError, RecursionError) as e:
            if self.strict:
                raise StorageError(f"Corrupt todo file {self.path}: {e}", self.path) from e
            logger.warning(f"Corrupt todo file {self.path}, using an empty list: {e}")
            return []

        logger.debug(f"Loaded {len(items)} item(s) from {self.path}")
        return items

    def save(self, items: Sequence[Item]) -> None:
        """Overwrite the todo file with the given items.

        Raises:
            StorageError: If the file cannot be written.
        """
        content = TodoJsonFormat.dumps(items)
        directory = self.path.parent

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                os.chmod(tmp_name, self._file_mode())
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}", self.path) from e

        logger.debug(f"Saved {len(items)} item(s) to {self.path}")

    def _file_mode(self) -> int:
        """Permissions for the rewritten file: the existing ones, else 0666 minus umask."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
