"""Adjacency rule and diagnostic checks over a painted grid."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from ..core.exceptions import LayoutValidationError
from ..core.models import Coord, Placement
from .grid import LetterGrid
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .registry import WordRegistry


LOGGER = get_logger(__name__)


def is_neighbor(first: Optional[Coord], second: Optional[Coord]) -> bool:
    """True when two cells touch by king move (diagonals included, never itself)."""

    if first is None or second is None:
        return False
    r1, c1 = first
    r2, c2 = second
    return abs(r1 - r2) <= 1 and abs(c1 - c2) <= 1 and (r1, c1) != (r2, c2)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]
    warnings: List[str] = field(default_factory=list)


class LayoutValidator:
    """Runs integrity checks over the grid without changing it.

    Hard errors are broken invariants the engine itself should never produce.
    Warnings describe states the editor permits on purpose: removing a letter
    from the middle of a word leaves a gap, and letters of deleted words stay
    on the grid until cleared.
    """

    def validate(self, registry: "WordRegistry", grid: LetterGrid) -> ValidationResult:
        messages: List[str] = []
        warnings: List[str] = []
        try:
            self._check_coordinates(grid)
            self._check_letters_valid(grid)
            self._check_unique_sequence(grid)
        except LayoutValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)

        by_word = self._group_by_word(grid)
        for word_id, cells in by_word.items():
            word = registry.get(word_id)
            if word is None:
                warnings.append(f"{len(cells)} letter(s) belong to a removed word")
                continue
            warnings.extend(self._chain_warnings(word.text, cells))
        for warning in warnings:
            LOGGER.info("Layout warning: %s", warning)
        return ValidationResult(ok=True, messages=[], warnings=warnings)

    def _check_coordinates(self, grid: LetterGrid) -> None:
        for r in range(grid.bounds.rows):
            for c in range(grid.bounds.cols):
                cell = grid.get_cell(r, c)
                if cell is not None and (cell.row, cell.col) != (r, c):
                    raise LayoutValidationError(
                        f"Placement at ({r},{c}) records coordinates ({cell.row},{cell.col})"
                    )

    def _check_letters_valid(self, grid: LetterGrid) -> None:
        for cell in grid.occupied_cells():
            if len(cell.letter) != 1 or cell.letter != cell.letter.upper():
                raise LayoutValidationError(
                    f"Invalid letter '{cell.letter}' at ({cell.row},{cell.col})"
                )

    def _check_unique_sequence(self, grid: LetterGrid) -> None:
        seen: Dict[tuple, Coord] = {}
        for cell in grid.occupied_cells():
            key = (cell.word_id, cell.sequence_index)
            if key in seen:
                raise LayoutValidationError(
                    f"Sequence index {cell.sequence_index} placed twice: "
                    f"{seen[key]} and {cell.coord}"
                )
            seen[key] = cell.coord

    @staticmethod
    def _group_by_word(grid: LetterGrid) -> Dict[str, List[Placement]]:
        grouped: Dict[str, List[Placement]] = defaultdict(list)
        for cell in grid.occupied_cells():
            grouped[cell.word_id].append(cell)
        for cells in grouped.values():
            cells.sort(key=lambda cell: cell.sequence_index)
        return dict(grouped)

    @staticmethod
    def _chain_warnings(text: str, cells: List[Placement]) -> List[str]:
        warnings: List[str] = []
        label = text.upper()
        indices = {cell.sequence_index for cell in cells}
        missing = [i for i in range(max(indices) + 1) if i not in indices]
        if missing:
            warnings.append(f"{label}: letters missing at positions {missing}")
        for prev, cell in zip(cells, cells[1:]):
            if cell.sequence_index == prev.sequence_index + 1 and not is_neighbor(prev.coord, cell.coord):
                warnings.append(
                    f"{label}: positions {prev.sequence_index} and {cell.sequence_index} "
                    f"at {prev.coord} and {cell.coord} are not adjacent"
                )
        for cell in cells:
            expected = text[cell.sequence_index].upper() if cell.sequence_index < len(text) else None
            if cell.letter != expected:
                warnings.append(
                    f"{label}: letter '{cell.letter}' at {cell.coord} does not match the word text"
                )
        return warnings
