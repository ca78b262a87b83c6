import unittest

from strands.core.models import Placement
from strands.engine.grid import LetterGrid
from strands.engine.registry import WordRegistry
from strands.engine.validator import LayoutValidator


class LayoutValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = WordRegistry()
        self.cat = self.registry.add("cat")
        self.grid = LetterGrid()
        self.validator = LayoutValidator()

    def put(self, letter: str, index: int, row: int, col: int, word_id: str = "") -> None:
        word_id = word_id or self.cat.id
        self.grid.set_cell(row, col, Placement(letter, word_id, "#000", index, row, col))

    def test_clean_chain_passes(self) -> None:
        self.put("C", 0, 0, 0)
        self.put("A", 1, 1, 1)
        self.put("T", 2, 2, 1)
        result = self.validator.validate(self.registry, self.grid)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])
        self.assertEqual(result.warnings, [])

    def test_mismatched_coordinates_fail(self) -> None:
        self.grid.set_cell(0, 0, Placement("C", self.cat.id, "#000", 0, 3, 3))
        result = self.validator.validate(self.registry, self.grid)
        self.assertFalse(result.ok)
        self.assertIn("(0,0)", result.messages[0])

    def test_duplicate_sequence_index_fails(self) -> None:
        self.put("C", 0, 0, 0)
        self.put("C", 0, 4, 4)
        result = self.validator.validate(self.registry, self.grid)
        self.assertFalse(result.ok)
        self.assertIn("placed twice", result.messages[0])

    def test_lowercase_letter_fails(self) -> None:
        self.put("c", 0, 0, 0)
        result = self.validator.validate(self.registry, self.grid)
        self.assertFalse(result.ok)

    def test_broken_chain_is_only_a_warning(self) -> None:
        self.put("C", 0, 0, 0)
        self.put("A", 1, 5, 5)
        result = self.validator.validate(self.registry, self.grid)
        self.assertTrue(result.ok)
        self.assertEqual(len(result.warnings), 1)
        self.assertIn("not adjacent", result.warnings[0])

    def test_gap_and_text_mismatch_warnings(self) -> None:
        self.put("C", 0, 0, 0)
        self.put("X", 2, 1, 1)
        result = self.validator.validate(self.registry, self.grid)
        self.assertTrue(result.ok)
        self.assertTrue(any("missing at positions [1]" in w for w in result.warnings))
        self.assertTrue(any("does not match" in w for w in result.warnings))

    def test_orphan_letters_are_reported(self) -> None:
        self.put("Z", 0, 7, 5, word_id="gone")
        result = self.validator.validate(self.registry, self.grid)
        self.assertTrue(result.ok)
        self.assertIn("removed word", result.warnings[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
