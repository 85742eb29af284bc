import io

import pytest

from timetoforget.console import Console
from timetoforget.dialogue import DialogueDatabase
from timetoforget.game_state import Ending, GameState, RoomID
from timetoforget.inventory import Inventory

IDS = [
    "InventoryOptions_1_1",
    "InventoryOptions_1_2",
    "InventoryOptions_1_3",
    "InventoryOptions_1_4",
    "Tutorial_1_1",
    "Tutorial_1_2",
    "Tutorial_1_3",
    "Tutorial_1_4",
    "Clairvoyance_1",
    "Items_1",
    "Items_2",
    "Items_3",
]


@pytest.fixture
def dialogue(tmp_path):
    path = tmp_path / "d.csv"
    path.write_text("".join(f"{i},ES {i},EN {i}\n" for i in IDS), encoding="utf-8")
    db = DialogueDatabase()
    db.load(path)
    return db


def make_console(text=""):
    out = io.StringIO()
    console = Console(io.StringIO(text), out, sleep=lambda s: None, clear=lambda: None, ansi=False)
    return console, out


def lines(out):
    return out.getvalue().splitlines()


def test_new_state():
    state = GameState()
    assert state.ending is Ending.NONE
    assert state.room_id is RoomID.INTRO
    assert not state.has_player_defeated_guardian()


@pytest.mark.parametrize("ending", [Ending.GOOD, Ending.BAD, Ending.DEATH])
def test_any_ending_defeats_guardian(ending):
    assert GameState(ending=ending).has_player_defeated_guardian()


def test_show_actions_without_knife(dialogue):
    console, out = make_console()
    GameState().show_player_actions(dialogue, console)
    assert lines(out) == [
        "ES InventoryOptions_1_1",
        "ES InventoryOptions_1_2",
        "ES InventoryOptions_1_3",
    ]


def test_show_actions_with_knife(dialogue):
    console, out = make_console()
    GameState(inventory=Inventory(has_knife=True)).show_player_actions(dialogue, console)
    assert lines(out)[-1] == "ES InventoryOptions_1_4"
    assert len(lines(out)) == 4


def test_first_clairvoyance_runs_tutorial_and_gives_knife(dialogue):
    console, out = make_console("3\n3\n")
    state = GameState()
    state.wait_for_player_action(dialogue, console)
    assert state.inventory.items == ["Items_3"]
    assert state.inventory.has_knife
    assert state.is_clairvoyance_tutorial_complete
    assert lines(out) == [
        "ES Tutorial_1_1",
        "ES Tutorial_1_2",
        "ES Tutorial_1_3",
        "ES Clairvoyance_1",
        "ES Tutorial_1_4",
    ]


def test_later_clairvoyance_skips_tutorial(dialogue):
    console, out = make_console("3\n2\n")
    state = GameState(is_clairvoyance_tutorial_complete=True)
    state.wait_for_player_action(dialogue, console)
    assert state.inventory.items == ["Items_2"]
    assert not state.inventory.has_knife
    assert lines(out) == ["ES Clairvoyance_1"]


def test_show_inventory_action(dialogue):
    console, out = make_console("1\n")
    state = GameState(is_clairvoyance_tutorial_complete=True, inventory=Inventory(["Items_1"]))
    state.wait_for_player_action(dialogue, console)
    assert lines(out) == ["ES Items_1"]
    assert state.ending is Ending.NONE


def test_fourth_action_needs_knife(dialogue):
    console, out = make_console("4\n1\n")
    state = GameState(is_clairvoyance_tutorial_complete=True, inventory=Inventory(["Items_2"]))
    state.wait_for_player_action(dialogue, console)
    assert lines(out) == ["ES Items_2"]


def test_fourth_action_with_knife_does_nothing(dialogue):
    console, out = make_console("4\n")
    inventory = Inventory(["Items_3"], has_knife=True)
    state = GameState(is_clairvoyance_tutorial_complete=True, inventory=inventory)
    state.wait_for_player_action(dialogue, console)
    assert out.getvalue() == ""
    assert state.ending is Ending.NONE


@pytest.mark.parametrize(
    "item, ending",
    [("Items_1", Ending.GOOD), ("Items_2", Ending.BAD), ("Items_3", Ending.DEATH)],
)
def test_using_item_sets_ending(dialogue, item, ending):
    console, _ = make_console("2\n1\n")
    state = GameState(is_clairvoyance_tutorial_complete=True, inventory=Inventory([item]))
    state.wait_for_player_action(dialogue, console)
    assert state.ending is ending
    assert state.has_player_defeated_guardian()


def test_using_empty_inventory_keeps_playing(dialogue):
    console, _ = make_console("2\n")
    state = GameState(is_clairvoyance_tutorial_complete=True)
    state.wait_for_player_action(dialogue, console)
    assert state.ending is Ending.NONE