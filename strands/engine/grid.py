"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterator, List, Optional

from ..core.constants import GRID_BOUNDS, Bounds
from ..core.models import Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Fixed-size matrix of cell slots, each empty or holding one placement.

    The grid is a plain substrate: it enforces no placement rules. Keeping
    letters in order and adjacent is the job of
    :class:`~strands.engine.placement.PlacementEngine`.
    """

    def __init__(self, bounds: Bounds = GRID_BOUNDS) -> None:
        self.bounds = bounds
        self.cells: List[List[Optional[Placement]]] = [
            [None for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]

    # ------------------------------------------------------------------
    # Cell manipulation
    # ------------------------------------------------------------------
    def get_cell(self, row: int, col: int) -> Optional[Placement]:
        self._check_bounds(row, col)
        return self.cells[row][col]

    def set_cell(self, row: int, col: int, placement: Optional[Placement]) -> None:
        self._check_bounds(row, col)
        self.cells[row][col] = placement

    def clear_cells_of_word(self, word_id: str) -> int:
        """Empty every cell owned by ``word_id`` and return how many were cleared."""

        cleared = 0
        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                cell = self.cells[r][c]
                if cell is not None and cell.word_id == word_id:
                    self.cells[r][c] = None
                    cleared += 1
        if cleared:
            LOGGER.debug("Cleared %s cells of word %s", cleared, word_id)
        return cleared

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.bounds.rows}x{self.bounds.cols} grid")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def occupied_cells(self) -> Iterator[Placement]:
        """Yield occupied cells in row-major order."""

        for row in self.cells:
            for cell in row:
                if cell is not None:
                    yield cell

    def cells_of_word(self, word_id: str) -> List[Placement]:
        return [cell for cell in self.occupied_cells() if cell.word_id == word_id]

    def highest_placement(self, word_id: str) -> Optional[Placement]:
        """Return the word's cell with the largest sequence index, if any.

        Ties (which the engine never produces) resolve to the first cell in
        scan order.
        """

        best: Optional[Placement] = None
        for cell in self.cells_of_word(word_id):
            if best is None or cell.sequence_index > best.sequence_index:
                best = cell
        return best

    @property
    def filled_count(self) -> int:
        return sum(1 for _ in self.occupied_cells())

    @property
    def capacity(self) -> int:
        return self.bounds.area

    def is_empty(self) -> bool:
        return next(self.occupied_cells(), None) is None
