"""The player's inventory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .console import Color, Console, TextSpeed
from .dialogue import DialogueDatabase

ITEM_OUTCOMES = {"Items_1": 0, "Items_2": 1, "Items_3": 2}


@dataclass
class Inventory:
    """Items the player holds, by dialogue identifier."""

    items: list[str] = field(default_factory=list)
    has_knife: bool = False

    def show(self, dialogue: DialogueDatabase, console: Console) -> None:
        """Print the description of every item."""
        for item in self.items:
            console.print_line(dialogue.get(item), Color.DEFAULT_WHITE, TextSpeed.MEDIUM)

    def use_item(self, console: Console) -> Optional[int]:
        """Ask for an item by number and return its outcome index.

        Returns ``None`` when the inventory is empty or the item has no
        outcome. Choosing the number one past the last item raises
        ``IndexError``.
        """
        if not self.items:
            return None
        choice = console.read_int(1, len(self.items) + 1)
        if choice - 1 >= len(self.items):
            raise IndexError(f"no item number {choice}")
        return ITEM_OUTCOMES.get(self.items[choice - 1])