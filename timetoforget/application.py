"""The game: startup, introduction, the first guardian and its endings."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from .console import Color, Console, TextSpeed
from .dialogue import DialogueDatabase
from .game_state import Ending, GameState, RoomID

DIALOGUE_FILE = "ATF-TextID.csv"
MUSIC_FILE = "Music.wav"
CONTINUE_PROMPT = "Input_1_1"


@dataclass(frozen=True)
class _Line:
    """One line of a scripted scene."""

    dialogue_id: str
    speed: int = TextSpeed.MEDIUM
    color: int = Color.DEFAULT_WHITE
    wait: bool = True


_TITLE = (
    _Line("Title_1_1", TextSpeed.SLOW, wait=False),
    _Line("Title_1_2", TextSpeed.SLOW),
    _Line("Title_1_3", TextSpeed.SLOW, wait=False),
    _Line("Title_1_4", TextSpeed.SLOW, wait=False),
    _Line("Title_1_5", TextSpeed.SLOW, wait=False),
)

_INTRO = (
    _Line("Intro_1_1", TextSpeed.FAST),
    _Line("Intro_1_2", TextSpeed.FAST),
    _Line("Intro_1_3", TextSpeed.FAST),
    _Line("Intro_1_4", wait=False),
    _Line("Intro_1_5", color=Color.GREEN, wait=False),
    _Line("Intro_1_6", color=Color.RED),
    _Line("Intro_1_7"),
    _Line("Intro_1_8"),
    _Line("Intro_1_9"),
    _Line("Intro_1_10"),
)

_GUARDIAN_1 = tuple(
    _Line(f"Guardian_1_{number}") for number in (1, 11, 12, 13, 14, 15, 16)
)


def _ending_scene(name: str) -> tuple[_Line, ...]:
    return tuple(
        _Line(
            f"Guardian_1_{name}_{number}",
            TextSpeed.SLOW if number in (7, 15) else TextSpeed.MEDIUM,
        )
        for number in range(1, 17)
    )


_ENDINGS = {
    Ending.GOOD: _ending_scene("Good"),
    Ending.BAD: _ending_scene("Bad"),
    Ending.DEATH: tuple(
        _Line(f"Guardian_1_Death_{number}", wait=False) for number in range(1, 5)
    ),
}

_DEMO_END = (_Line("Demo_End_1", wait=False),)


def play_music(path: str | os.PathLike[str]) -> None:
    """Start playing a wave file in the background where the platform allows it."""
    try:
        import winsound
    except ImportError:
        return
    try:
        winsound.PlaySound(os.fspath(path), winsound.SND_FILENAME | winsound.SND_ASYNC)
    except RuntimeError:
        pass


class Application:
    """Runs one play-through of the demo."""

    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        dialogue_path: str | os.PathLike[str] = DIALOGUE_FILE,
        music_path: str | os.PathLike[str] = MUSIC_FILE,
        music_player: Callable[[str | os.PathLike[str]], None] = play_music,
    ) -> None:
        self.console = console if console is not None else Console()
        self.dialogue = DialogueDatabase()
        self.game_state = GameState()
        self.is_running = False
        self._dialogue_path = dialogue_path
        self._music_path = music_path
        self._music_player = music_player

    def initialize(self) -> None:
        """Load the dialogue, reset the tutorial and start the music.

        A dialogue file that cannot be read leaves every line empty.
        """
        try:
            self.dialogue.load(self._dialogue_path)
        except OSError:
            pass
        self.is_running = True
        self.game_state.is_clairvoyance_tutorial_complete = False
        self._music_player(self._music_path)

    def game_loop(self) -> None:
        """Play the title, introduction, first guardian and its ending."""
        self._play(_TITLE)
        self.dialogue.language = self.console.read_int(0, 1)

        self.game_state.room_id = RoomID.INTRO
        self._play(_INTRO)

        self.game_state.room_id = RoomID.GUARDIAN1
        self._play(_GUARDIAN_1)

        while not self.game_state.has_player_defeated_guardian():
            self.game_state.show_player_actions(self.dialogue, self.console)
            self.game_state.wait_for_player_action(self.dialogue, self.console)

        self._play(_ENDINGS.get(self.game_state.ending, ()))
        self._play(_DEMO_END)

    def on_exit(self) -> None:
        """Mark the game as no longer running."""
        self.is_running = False

    def _play(self, lines: Iterable[_Line]) -> None:
        for line in lines:
            self.console.print_line(self.dialogue.get(line.dialogue_id), line.color, line.speed)
            if line.wait:
                self.console.wait_for_input(self.dialogue.get(CONTINUE_PROMPT))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game in the terminal."""
    parser = argparse.ArgumentParser(description="A text adventure.")
    parser.parse_args(argv)
    app = Application()
    app.initialize()
    app.game_loop()
    app.on_exit()
    return 0