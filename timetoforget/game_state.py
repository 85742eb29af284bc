"""Progress of a game: room, inventory, tutorial and ending."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .console import Color, Console, TextSpeed
from .dialogue import DialogueDatabase
from .inventory import Inventory


class RoomID(Enum):
    """Where the player is."""

    INTRO = 0
    GUARDIAN1 = 1
    GUARDIAN2 = 2
    GUARDIAN3 = 3
    GUARDIAN4 = 4


class Ending(Enum):
    """How the encounter with a guardian ended."""

    GOOD = 0
    BAD = 1
    DEATH = 2
    NONE = 3


_OUTCOME_ENDINGS = {0: Ending.GOOD, 1: Ending.BAD, 2: Ending.DEATH}
_VISION_ITEMS = {1: "Items_1", 2: "Items_2", 3: "Items_3"}
_KNIFE = "Items_3"


@dataclass
class GameState:
    """Mutable state of one play-through."""

    is_clairvoyance_tutorial_complete: bool = False
    room_id: RoomID = RoomID.INTRO
    inventory: Inventory = field(default_factory=Inventory)
    ending: Ending = Ending.NONE

    def _say(self, dialogue: DialogueDatabase, console: Console, dialogue_id: str) -> None:
        console.print_line(dialogue.get(dialogue_id), Color.DEFAULT_WHITE, TextSpeed.MEDIUM)

    def show_player_actions(self, dialogue: DialogueDatabase, console: Console) -> None:
        """List the actions available; the fourth only with the knife."""
        for dialogue_id in ("InventoryOptions_1_1", "InventoryOptions_1_2", "InventoryOptions_1_3"):
            self._say(dialogue, console, dialogue_id)
        if self.inventory.has_knife:
            self._say(dialogue, console, "InventoryOptions_1_4")

    def wait_for_player_action(self, dialogue: DialogueDatabase, console: Console) -> None:
        """Read one action and carry it out."""
        if not self.is_clairvoyance_tutorial_complete:
            self._say(dialogue, console, "Tutorial_1_1")
        choice = console.read_int(1, 4 if self.inventory.has_knife else 3)
        if choice == 1:
            self.inventory.show(dialogue, console)
        elif choice == 2:
            outcome = self.inventory.use_item(console)
            if outcome in _OUTCOME_ENDINGS:
                self.ending = _OUTCOME_ENDINGS[outcome]
        elif choice == 3:
            self._clairvoyance(dialogue, console)

    def _clairvoyance(self, dialogue: DialogueDatabase, console: Console) -> None:
        if not self.is_clairvoyance_tutorial_complete:
            self._say(dialogue, console, "Tutorial_1_2")
            self._say(dialogue, console, "Tutorial_1_3")
        self._say(dialogue, console, "Clairvoyance_1")
        item = _VISION_ITEMS[console.read_int(1, 3)]
        self.inventory.items.append(item)
        if item == _KNIFE:
            self.inventory.has_knife = True
        if not self.is_clairvoyance_tutorial_complete:
            self.is_clairvoyance_tutorial_complete = True
            self._say(dialogue, console, "Tutorial_1_4")

    def has_player_defeated_guardian(self) -> bool:
        """True once an ending has been reached."""
        return self.ending is not Ending.NONE