# timetoforget

A short text adventure for the terminal. Text is typed out letter by letter,
in colour, and every line of the story comes from a dialogue table so the game
can be played in Spanish or in English.

## Installing

```
pip install .
```

## Playing

The game reads its dialogue from a file named `ATF-TextID.csv` in the current
working directory. Start it from that directory:

```
timetoforget
```

If the dialogue file cannot be read, the game still runs but every line of
text is empty. On Windows the game also starts playing `Music.wav` from the
current directory in the background; elsewhere there is no music.

At the title screen choose a language: `0` for Spanish, `1` for English.
Press Enter to advance through the story; the screen is cleared after each
pause. When facing the guardian you pick actions by number:

1. look at your inventory
2. use an item from your inventory
3. use clairvoyance to find one of three items
4. (offered once you have found the knife) accepted, but has no effect yet

Numbers outside the offered range are ignored; anything that is not a number
prints a complaint and is discarded. Which item you use decides how the
encounter ends: the first item leads to the good ending, the second to the bad
ending and the third (the knife) to death. When asked which item to use, the
number one past your last item is accepted by the prompt but is an error.

## The dialogue file

Each line of `ATF-TextID.csv` holds three comma-separated fields:

```
Intro_1_1,Texto en español,Text in English
```

The first field is the dialogue identifier, the second the Spanish text and the
third the English text. Text fields cannot contain commas; fields beyond the
third are ignored and missing ones are empty. Blank lines are skipped, and when
an identifier appears twice its first row wins. Identifiers missing from the
file are shown as empty lines.

## Using the pieces

The building blocks can also be used on their own:

```python
from timetoforget.dialogue import DialogueDatabase, ENGLISH
from timetoforget.console import Console, Color, TextSpeed

dialogue = DialogueDatabase()
dialogue.load("ATF-TextID.csv")
dialogue.language = ENGLISH

console = Console()
console.print_line(dialogue.get("Title_1_1"), Color.GREEN, TextSpeed.FAST)
```

- `timetoforget.dialogue.DialogueDatabase` — `load(path)` and `get(dialogue_id)`.
- `timetoforget.console.Console` — `print_text`, `print_line`, `new_line`,
  `clear_screen`, `wait_for_input` and `read_int`, over any pair of text
  streams; `Color` and `TextSpeed` name the colours and per-letter delays.
- `timetoforget.inventory.Inventory` — the items held and whether the knife is
  among them.
- `timetoforget.game_state.GameState` — room, inventory, tutorial progress and
  `Ending`.
- `timetoforget.application.Application` — `initialize()`, `game_loop()` and
  `on_exit()`; `main()` is what the `timetoforget` command runs.

## What it does not do

The game is a demo: it plays the introduction and the first guardian, shows
the ending reached, and stops. There is no saving or loading of progress, and
the later rooms named in `RoomID` have no scenes.

## Running the tests

```
pip install .[test]
pytest
```