"""Ordered word list with stable ids and rotating display colours."""

from __future__ import annotations

import uuid
from typing import Iterator, List, Optional, Sequence

from ..core.constants import WORD_COLORS
from ..core.models import Word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordRegistry:
    """Owns every :class:`Word` of the session, in the order they were added.

    The colour counter lives for the whole session: it advances once per
    added word and is never rewound, so removing a word does not hand its
    colour to the next one.
    """

    def __init__(self, palette: Sequence[str] = WORD_COLORS) -> None:
        if not palette:
            raise ValueError("Colour palette must not be empty")
        self.palette = tuple(palette)
        self._words: List[Word] = []
        self._next_color_index = 0

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def add(self, text: str) -> Optional[Word]:
        text = text.strip()
        if not text:
            LOGGER.debug("Ignoring empty word")
            return None
        color = self.palette[self._next_color_index % len(self.palette)]
        self._next_color_index += 1
        word = Word(id=uuid.uuid4().hex, text=text, color=color)
        self._words.append(word)
        LOGGER.info("Added word %s (%s)", word.text, word.color)
        return word

    def rename(self, word_id: str, text: str) -> Optional[Word]:
        text = text.strip()
        word = self.get(word_id)
        if word is None or not text:
            return None
        if word.text != text:
            LOGGER.info("Renamed word %s to %s", word.text, text)
        word.text = text
        return word

    def remove(self, word_id: str) -> Optional[Word]:
        word = self.get(word_id)
        if word is None:
            return None
        self._words.remove(word)
        LOGGER.info("Removed word %s", word.text)
        return word

    def get(self, word_id: str) -> Optional[Word]:
        for word in self._words:
            if word.id == word_id:
                return word
        return None

    def index_of(self, word_id: str) -> int:
        """Position of the word in list order, or -1 when it no longer exists."""

        for index, word in enumerate(self._words):
            if word.id == word_id:
                return index
        return -1

    def resolve(self, token: str) -> Optional[Word]:
        """Find a word by 1-based list number or by case-insensitive text."""

        token = token.strip()
        if token.isdigit():
            position = int(token)
            if 1 <= position <= len(self._words):
                return self._words[position - 1]
            return None
        wanted = token.upper()
        for word in self._words:
            if word.text.upper() == wanted:
                return word
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def words(self) -> List[Word]:
        return list(self._words)

    @property
    def next_color_index(self) -> int:
        return self._next_color_index

    @property
    def total_letters(self) -> int:
        return sum(len(word.text) for word in self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(list(self._words))

    def __len__(self) -> int:
        return len(self._words)
