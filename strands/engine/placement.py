"""Click-driven letter placement for the selected word.

One word at a time is selected. Each click on the grid either paints the
selected word's next letter, removes one of its letters again, or is
rejected without touching anything:

* the first letter may go on any empty cell;
* every later letter must touch the previously painted one by king move;
* cells owned by another word are never overwritten;
* clicking a cell of the selected word clears it, and painting resumes after
  the highest letter still on the grid.

Rejections are reported through :class:`ClickOutcome` and debug logging
only; no exception is raised for them.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from ..core.constants import ClickOutcome
from ..core.models import Coord, Placement, Selection
from .grid import LetterGrid
from .validator import is_neighbor
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

CompletionCallback = Callable[[str, str], None]


class PlacementEngine:
    """Holds the active selection and applies the click rule to a grid."""

    def __init__(self, grid: LetterGrid, on_complete: Optional[CompletionCallback] = None) -> None:
        self.grid = grid
        self.on_complete = on_complete
        self.selection: Optional[Selection] = None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_word(self, word_id: str, word_text: str, color: str) -> Optional[Selection]:
        """Select a word, or deselect it when it is already selected.

        A partially painted word resumes after its highest letter on the grid.
        """

        if self.selection is not None and self.selection.word_id == word_id:
            LOGGER.debug("Deselecting %s", self.selection.word_text)
            self.selection = None
            return None

        next_index, last_placed = self.resume_point(word_id)
        self.selection = Selection(
            word_id=word_id,
            word_text=word_text.strip(),
            color=color,
            next_index=next_index,
            last_placed=last_placed,
        )
        LOGGER.debug(
            "Selected %s at letter %s (last placed %s)",
            self.selection.word_text,
            next_index,
            last_placed,
        )
        return self.selection

    def deselect(self) -> None:
        self.selection = None

    def is_selected(self, word_id: str) -> bool:
        return self.selection is not None and self.selection.word_id == word_id

    def resume_point(self, word_id: str) -> Tuple[int, Optional[Coord]]:
        """Next letter index and anchor cell derived from the grid alone."""

        highest = self.grid.highest_placement(word_id)
        if highest is None:
            return 0, None
        return highest.sequence_index + 1, highest.coord

    def clear_word(self, word_id: str) -> int:
        """Remove all of a word's letters; a selected word restarts from scratch."""

        cleared = self.grid.clear_cells_of_word(word_id)
        selection = self.selection
        if selection is not None and selection.word_id == word_id:
            selection.next_index = 0
            selection.last_placed = None
        return cleared

    # ------------------------------------------------------------------
    # Click rule
    # ------------------------------------------------------------------
    def click(self, row: int, col: int) -> ClickOutcome:
        selection = self.selection
        if selection is None:
            LOGGER.debug("Click at (%s,%s) ignored: no word selected", row, col)
            return ClickOutcome.IGNORED

        if selection.is_exhausted:
            LOGGER.debug("%s already fully placed, deselecting", selection.word_text)
            self.selection = None
            return ClickOutcome.EXHAUSTED

        current = self.grid.get_cell(row, col)
        if current is not None:
            if current.word_id != selection.word_id:
                LOGGER.debug("Cell (%s,%s) belongs to another word", row, col)
                return ClickOutcome.BLOCKED
            self.grid.set_cell(row, col, None)
            selection.next_index, selection.last_placed = self.resume_point(selection.word_id)
            LOGGER.debug(
                "Removed %s from (%s,%s); resuming at letter %s",
                current.letter,
                row,
                col,
                selection.next_index,
            )
            return ClickOutcome.REMOVED

        index = selection.next_index
        if index > 0 and not is_neighbor(selection.last_placed, (row, col)):
            LOGGER.debug(
                "Cell (%s,%s) does not touch last letter at %s",
                row,
                col,
                selection.last_placed,
            )
            return ClickOutcome.NOT_ADJACENT

        placement = Placement(
            letter=selection.word_text[index].upper(),
            word_id=selection.word_id,
            color=selection.color,
            sequence_index=index,
            row=row,
            col=col,
        )
        self.grid.set_cell(row, col, placement)

        if index + 1 == len(selection.word_text):
            self.selection = None
            LOGGER.info("Completed %s", selection.word_text)
            self._emit_completion(selection)
            return ClickOutcome.COMPLETED

        selection.next_index = index + 1
        selection.last_placed = (row, col)
        return ClickOutcome.PLACED

    def _emit_completion(self, selection: Selection) -> None:
        if self.on_complete is None:
            return
        try:
            self.on_complete(selection.word_id, selection.word_text)
        except Exception as exc:
            LOGGER.warning("Completion signal for %s failed: %s", selection.word_text, exc)
