"""Todo item data model for the Todo Menu application."""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class Item:
    """A single named, completable todo entry."""

    name: str
    completed: bool = False

    def toggle(self):
        """Flip the completion state (check <-> uncheck)."""
        self.completed = not self.completed

    def render(self) -> str:
        """Format the item as a checkbox line."""
        if self.completed:
            return f"[x] {self.name}"
        return f"[ ] {self.name}"

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Item to its persisted record."""
        return {
            "name": self.name,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        """Create an Item from a persisted record.

        Raises:
            ValueError: If the record is not a ``{name, completed}`` mapping
                with a string name and a boolean completion flag.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")

        name = data.get("name")
        completed = data.get("completed")

        if not isinstance(name, str):
            raise ValueError(f"Item 'name' must be a string, got {name!r}")
        if not isinstance(completed, bool):
            raise ValueError(f"Item 'completed' must be a boolean, got {completed!r}")

        return cls(name=name, completed=completed)
