"""Layout file export.

The layout file is UTF-8 text with a leading byte-order mark and four lines:

1. theme text
2. hint text
3. comma-joined word texts in list order
4. comma-joined ``wordIndex;sequenceIndex;row;col`` records, one per painted
   cell in row-major order (``wordIndex`` is -1 for a word that was removed)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, NamedTuple, Optional

from ..core.exceptions import LayoutExportError
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid
    from ..engine.registry import WordRegistry


LOGGER = get_logger(__name__)

BOM = "\ufeff"
DEFAULT_EXPORT_NAME = "strands_layout.csv"


class ExportRecord(NamedTuple):
    word_index: int
    sequence_index: int
    row: int
    col: int

    def format(self) -> str:
        return f"{self.word_index};{self.sequence_index};{self.row};{self.col}"


def placement_records(registry: "WordRegistry", grid: "LetterGrid") -> List[ExportRecord]:
    return [
        ExportRecord(
            word_index=registry.index_of(cell.word_id),
            sequence_index=cell.sequence_index,
            row=cell.row,
            col=cell.col,
        )
        for cell in grid.occupied_cells()
    ]


def format_layout(theme: str, hint: str, registry: "WordRegistry", grid: "LetterGrid") -> str:
    """Render the four layout lines (without the byte-order mark)."""

    words_line = ",".join(word.text for word in registry)
    cells_line = ",".join(record.format() for record in placement_records(registry, grid))
    return "\n".join([theme, hint, words_line, cells_line])


class LayoutExporter:
    """Write layout files for the puzzle renderer."""

    def __init__(self, export_dir: Path | str = Path(".")) -> None:
        self.export_dir = Path(export_dir)

    def export(
        self,
        theme: str,
        hint: str,
        registry: "WordRegistry",
        grid: "LetterGrid",
        path: Optional[Path | str] = None,
    ) -> Path:
        """Write the layout and return the file path."""

        target = Path(path) if path is not None else self.export_dir / DEFAULT_EXPORT_NAME
        content = BOM + format_layout(theme, hint, registry, grid)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the separators as bare \n on every platform
            with target.open("w", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except OSError as exc:
            raise LayoutExportError(f"Could not write layout to {target}: {exc}") from exc
        LOGGER.info("Layout exported: %s (%s words, %s cells)", target, len(registry), grid.filled_count)
        return target
