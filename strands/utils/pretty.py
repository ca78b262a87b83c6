"""Pretty-print helpers for the editing session."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..engine.tracker import placement_progress

if TYPE_CHECKING:
    from ..engine.editor import PuzzleEditor
    from ..engine.grid import LetterGrid


EMPTY_SYMBOL = "."


def format_grid(grid: LetterGrid) -> str:
    width = grid.bounds.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.bounds.rows):
        row_cells = []
        for c in range(width):
            cell = grid.get_cell(r, c)
            row_cells.append(cell.letter if cell is not None else EMPTY_SYMBOL)
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_word_list(editor: PuzzleEditor) -> str:
    """One line per word: number, text, letters painted and state markers."""

    progress = placement_progress(editor.grid)
    selection = editor.selection
    lines: List[str] = []
    for number, word in enumerate(editor.registry, start=1):
        markers = []
        if word.id in editor.placed_word_ids:
            markers.append("on grid")
        if selection is not None and selection.word_id == word.id:
            markers.append("selected")
        if editor.editing_word_id == word.id:
            markers.append("editing")
        suffix = f"  [{', '.join(markers)}]" if markers else ""
        placed = progress.get(word.id, 0)
        lines.append(f"{number:>2}. {word.text:<12} {placed}/{len(word.text)} {word.color}{suffix}")
    if not lines:
        lines.append("    (no words)")
    return "\n".join(lines)


def format_status(editor: PuzzleEditor) -> str:
    total, capacity = editor.letter_budget
    lines = [
        f"Theme: {editor.theme}",
        f"Hint:  {editor.hint}",
        f"Total letters across all words: {total} / {capacity}",
    ]
    selection = editor.selection
    if selection is None:
        lines.append("Selected: none")
    elif selection.is_exhausted:
        lines.append(f"Selected: {selection.word_text} (fully placed)")
    else:
        lines.append(
            f"Selected: {selection.word_text} next '{selection.next_letter}' "
            f"(letter {selection.next_index + 1} of {len(selection.word_text)})"
        )
    return "\n".join(lines)


def print_session(editor: PuzzleEditor, *, stream=None) -> None:
    """Print status, word list and grid."""

    stream = stream or sys.stdout
    print(format_status(editor), file=stream)
    print(file=stream)
    print(format_word_list(editor), file=stream)
    print(file=stream)
    print(format_grid(editor.grid), file=stream)
