"""Shared constants and enumerations for the strands layout editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


GRID_ROWS = 8
GRID_COLS = 6

# Display colours handed out to words in creation order.
WORD_COLORS: Tuple[str, ...] = (
    "#EF4444",  # red
    "#3B82F6",  # blue
    "#10B981",  # green
    "#F59E0B",  # amber
    "#8B5CF6",  # violet
    "#EC4899",  # pink
    "#06B6D4",  # cyan
    "#6B7280",  # gray
    "#A855F7",  # purple
    "#EAB308",  # yellow
    "#F43F5E",  # rose
    "#22C55E",  # emerald
)


class ClickOutcome(str, Enum):
    """What a single grid click did."""

    IGNORED = "IGNORED"
    EXHAUSTED = "EXHAUSTED"
    REMOVED = "REMOVED"
    BLOCKED = "BLOCKED"
    NOT_ADJACENT = "NOT_ADJACENT"
    PLACED = "PLACED"
    COMPLETED = "COMPLETED"

    @property
    def mutated(self) -> bool:
        return self in {ClickOutcome.REMOVED, ClickOutcome.PLACED, ClickOutcome.COMPLETED}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def area(self) -> int:
        return self.rows * self.cols


GRID_BOUNDS = Bounds(rows=GRID_ROWS, cols=GRID_COLS)
