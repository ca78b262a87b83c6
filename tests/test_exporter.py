import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from strands.core.exceptions import LayoutExportError
from strands.core.models import Placement
from strands.engine.grid import LetterGrid
from strands.engine.registry import WordRegistry
from strands.io.exporter import (
    BOM,
    DEFAULT_EXPORT_NAME,
    ExportRecord,
    LayoutExporter,
    format_layout,
    placement_records,
)


class ExportFormatTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = WordRegistry()
        self.cat = self.registry.add("CAT")
        self.dog = self.registry.add("DOG")
        self.grid = LetterGrid()

    def test_single_placement_layout(self) -> None:
        self.grid.set_cell(0, 0, Placement("C", self.cat.id, self.cat.color, 0, 0, 0))
        body = format_layout("Animals", "Farm", self.registry, self.grid)
        self.assertEqual(body, "Animals\nFarm\nCAT,DOG\n0;0;0;0")

    def test_records_follow_row_major_order(self) -> None:
        self.grid.set_cell(2, 1, Placement("O", self.dog.id, self.dog.color, 1, 2, 1))
        self.grid.set_cell(0, 4, Placement("A", self.cat.id, self.cat.color, 1, 0, 4))
        self.grid.set_cell(1, 0, Placement("D", self.dog.id, self.dog.color, 0, 1, 0))
        records = placement_records(self.registry, self.grid)
        self.assertEqual(
            records,
            [ExportRecord(0, 1, 0, 4), ExportRecord(1, 0, 1, 0), ExportRecord(1, 1, 2, 1)],
        )

    def test_removed_word_exports_sentinel(self) -> None:
        self.grid.set_cell(3, 3, Placement("D", self.dog.id, self.dog.color, 0, 3, 3))
        self.registry.remove(self.dog.id)
        body = format_layout("", "", self.registry, self.grid)
        self.assertEqual(body, "\n\nCAT\n-1;0;3;3")

    def test_empty_session_has_four_lines(self) -> None:
        body = format_layout("", "", WordRegistry(), LetterGrid())
        self.assertEqual(body.split("\n"), ["", "", "", ""])

    def test_theme_and_hint_are_raw(self) -> None:
        body = format_layout("  Zoo, animals ", "Farm;yard", WordRegistry(), LetterGrid())
        self.assertTrue(body.startswith("  Zoo, animals \nFarm;yard\n"))


class LayoutExporterTests(unittest.TestCase):
    def test_writes_bom_and_body(self) -> None:
        registry = WordRegistry()
        cat = registry.add("CAT")
        registry.add("DOG")
        grid = LetterGrid()
        grid.set_cell(0, 0, Placement("C", cat.id, cat.color, 0, 0, 0))
        with tempfile.TemporaryDirectory() as tmpdir:
            exporter = LayoutExporter(tmpdir)
            path = exporter.export("Animals", "Farm", registry, grid)
            self.assertEqual(path, Path(tmpdir) / DEFAULT_EXPORT_NAME)
            raw = path.read_bytes()
            self.assertTrue(raw.startswith(b"\xef\xbb\xbf"))
            self.assertEqual(raw.decode("utf-8"), BOM + "Animals\nFarm\nCAT,DOG\n0;0;0;0")

    def test_explicit_path_and_missing_parent(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "nested" / "layout.csv"
            path = LayoutExporter().export("t", "h", WordRegistry(), LetterGrid(), path=target)
            self.assertEqual(path, target)
            self.assertEqual(target.read_text(encoding="utf-8-sig"), "t\nh\n\n")

    def test_write_failure_is_wrapped(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch.object(Path, "open", side_effect=PermissionError("denied")):
                with self.assertRaises(LayoutExportError):
                    LayoutExporter(tmpdir).export("t", "h", WordRegistry(), LetterGrid())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
