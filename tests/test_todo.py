"""Tests for the Item model."""

import pytest

from todo_menu.todo import Item


class TestItem:
    """Test Item model functionality."""

    def test_item_creation(self):
        """New items start unchecked."""
        item = Item(name="Buy milk")

        assert item.name == "Buy milk"
        assert item.completed is False

    def test_toggle(self):
        """Toggle flips the completion flag both ways."""
        item = Item(name="Buy milk")

        item.toggle()
        assert item.completed is True

        item.toggle()
        assert item.completed is False

    def test_render(self):
        assert Item(name="Done", completed=True).render() == "[x] Done"
        assert Item(name="Open").render() == "[ ] Open"
        assert str(Item(name="")) == "[ ] "

    def test_to_dict(self):
        item = Item(name="Call Bob", completed=True)

        assert item.to_dict() == {"name": "Call Bob", "completed": True}

    def test_from_dict(self):
        item = Item.from_dict({"name": "Call Bob", "completed": False})

        assert item == Item(name="Call Bob", completed=False)

    @pytest.mark.parametrize("record", [
        {"name": "No flag"},
        {"completed": True},
        {"name": 3, "completed": False},
        {"name": "Bad flag", "completed": "yes"},
        ["name", "completed"],
    ])
    def test_from_dict_rejects_bad_records(self, record):
        """Records must carry a string name and a boolean flag."""
        with pytest.raises(ValueError):
            Item.from_dict(record)
