"""Editing session tying words, grid, placement and export together.

The editor is the single object a front end talks to. Each public method
handles one discrete author action and runs to completion; after any action
that may touch the grid, the set of words on the grid is recomputed from the
cells themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Optional, Sequence, Tuple

from ..core.constants import WORD_COLORS, ClickOutcome
from ..core.models import Selection, Word
from ..io.chime import CompletionChime
from ..io.exporter import LayoutExporter
from .grid import LetterGrid
from .placement import CompletionCallback, PlacementEngine
from .registry import WordRegistry
from .tracker import recompute_placed_words
from .validator import LayoutValidator, ValidationResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class EditorConfig:
    """Configuration values for an editing session."""

    export_dir: Path | str = Path(".")
    chime_enabled: bool = True
    palette: Sequence[str] = WORD_COLORS


class PuzzleEditor:
    """One authoring session: created at start-up and kept until exit."""

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        chime: Optional[CompletionCallback] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.registry = WordRegistry(self.config.palette)
        self.grid = LetterGrid()
        self.chime: CompletionCallback = chime or CompletionChime(enabled=self.config.chime_enabled)
        self.engine = PlacementEngine(self.grid, on_complete=self.chime)
        self.exporter = LayoutExporter(self.config.export_dir)
        self.validator = LayoutValidator()
        self.theme = ""
        self.hint = ""
        self.editing_word_id: Optional[str] = None
        self.placed_word_ids: FrozenSet[str] = frozenset()

    # ------------------------------------------------------------------
    # Word list
    # ------------------------------------------------------------------
    def add_word(self, text: str) -> Optional[Word]:
        return self.registry.add(text)

    def remove_word(self, word_id: str) -> Optional[Word]:
        """Drop a word from the list. Letters already painted stay on the grid."""

        if self.engine.is_selected(word_id):
            self.engine.deselect()
        if self.editing_word_id == word_id:
            self.editing_word_id = None
        return self.registry.remove(word_id)

    def start_edit(self, word_id: str) -> bool:
        if self.registry.get(word_id) is None:
            return False
        self.editing_word_id = word_id
        self.engine.deselect()
        return True

    def save_edit(self, word_id: str, text: str) -> Optional[Word]:
        """Rename a word; a changed text wipes its painted letters.

        An empty text cancels the edit and leaves the word as it was. A
        selection that is already active keeps the text it was selected with.
        """

        word = self.registry.get(word_id)
        new_text = text.strip()
        if self.editing_word_id == word_id:
            self.editing_word_id = None
        if word is None:
            return None
        if not new_text:
            LOGGER.info("Cannot save an empty word; edit cancelled")
            return None
        if word.text != new_text:
            self.engine.clear_word(word_id)
            self._refresh()
        return self.registry.rename(word_id, new_text)

    def cancel_edit(self) -> None:
        self.editing_word_id = None

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def select_word(self, word_id: str) -> Optional[Selection]:
        word = self.registry.get(word_id)
        if word is None:
            return None
        self.editing_word_id = None
        return self.engine.select_word(word.id, word.text, word.color)

    def deselect(self) -> None:
        self.engine.deselect()

    def click(self, row: int, col: int) -> ClickOutcome:
        outcome = self.engine.click(row, col)
        if outcome.mutated:
            self._refresh()
        return outcome

    def clear_word_cells(self, word_id: str) -> int:
        cleared = self.engine.clear_word(word_id)
        self._refresh()
        return cleared

    @property
    def selection(self) -> Optional[Selection]:
        return self.engine.selection

    def _refresh(self) -> None:
        self.placed_word_ids = recompute_placed_words(self.grid)

    # ------------------------------------------------------------------
    # Theme, hint and output
    # ------------------------------------------------------------------
    def set_theme(self, text: str) -> None:
        self.theme = text

    def set_hint(self, text: str) -> None:
        self.hint = text

    @property
    def letter_budget(self) -> Tuple[int, int]:
        """Letters across all words versus cells available on the grid."""

        return self.registry.total_letters, self.grid.capacity

    def validate(self) -> ValidationResult:
        return self.validator.validate(self.registry, self.grid)

    def export(self, path: Optional[Path | str] = None) -> Path:
        return self.exporter.export(self.theme, self.hint, self.registry, self.grid, path=path)
