"""Localised dialogue lines looked up by identifier."""

from __future__ import annotations

import os

SPANISH = 0
ENGLISH = 1

_SEPARATOR = ","


class DialogueDatabase:
    """Dialogue lines in Spanish and English, keyed by identifier.

    ``language`` selects the table: 0 for Spanish, 1 for English.
    """

    def __init__(self, language: int = SPANISH) -> None:
        self.language = language
        self._spanish: dict[str, str] = {}
        self._english: dict[str, str] = {}

    def load(self, path: str | os.PathLike[str]) -> None:
        """Replace the contents with the rows of an ``id,spanish,english`` file.

        Fields beyond the third are ignored and missing fields are empty.
        When an identifier appears more than once, its first row wins.
        Raises ``OSError`` if the file cannot be opened.
        """
        spanish: dict[str, str] = {}
        english: dict[str, str] = {}
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\n")
                if not line:
                    continue
                fields = line.split(_SEPARATOR)
                fields.extend([""] * (3 - len(fields)))
                identifier, spanish_text, english_text = fields[:3]
                spanish.setdefault(identifier, spanish_text)
                english.setdefault(identifier, english_text)
        self._spanish = spanish
        self._english = english

    def get(self, dialogue_id: str) -> str:
        """Return the line for ``dialogue_id`` in the current language, or ``""``."""
        tables = {SPANISH: self._spanish, ENGLISH: self._english}
        table = tables.get(self.language)
        if table is None:
            return ""
        return table.get(dialogue_id, "")