"""Derived state recomputed from grid contents only."""

from __future__ import annotations

from collections import Counter
from typing import Dict, FrozenSet

from .grid import LetterGrid


def recompute_placed_words(grid: LetterGrid) -> FrozenSet[str]:
    """Return the ids of every word with at least one letter on the grid."""

    return frozenset(cell.word_id for cell in grid.occupied_cells())


def placement_progress(grid: LetterGrid) -> Dict[str, int]:
    """Count how many letters each word currently has on the grid."""

    return dict(Counter(cell.word_id for cell in grid.occupied_cells()))


__all__ = ["recompute_placed_words", "placement_progress"]
