"""Data models shared by the registry, grid and placement engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Coord = Tuple[int, int]


@dataclass
class Word:
    """A word the author wants to hide in the grid."""

    id: str
    text: str
    color: str


@dataclass(frozen=True)
class Placement:
    """A single letter of a word occupying one grid cell."""

    letter: str
    word_id: str
    color: str
    sequence_index: int
    row: int
    col: int

    @property
    def coord(self) -> Coord:
        return self.row, self.col


@dataclass
class Selection:
    """The word currently being painted onto the grid.

    ``word_text`` is captured when the word is selected; renaming the word
    afterwards does not change the letters this selection places.
    """

    word_id: str
    word_text: str
    color: str
    next_index: int = 0
    last_placed: Optional[Coord] = None

    @property
    def is_exhausted(self) -> bool:
        return self.next_index >= len(self.word_text)

    @property
    def next_letter(self) -> Optional[str]:
        if self.is_exhausted:
            return None
        return self.word_text[self.next_index].upper()
