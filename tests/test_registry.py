import unittest

from strands.core.constants import WORD_COLORS
from strands.engine.registry import WordRegistry


class WordRegistryTests(unittest.TestCase):
    def test_add_trims_and_assigns_palette_in_order(self) -> None:
        registry = WordRegistry()
        cat = registry.add("  cat ")
        dog = registry.add("dog")
        assert cat is not None and dog is not None
        self.assertEqual(cat.text, "cat")
        self.assertEqual(cat.color, WORD_COLORS[0])
        self.assertEqual(dog.color, WORD_COLORS[1])
        self.assertNotEqual(cat.id, dog.id)
        self.assertEqual([w.text for w in registry], ["cat", "dog"])

    def test_empty_text_is_rejected(self) -> None:
        registry = WordRegistry()
        self.assertIsNone(registry.add("   "))
        self.assertEqual(len(registry), 0)
        self.assertEqual(registry.next_color_index, 0)

    def test_palette_wraps_around(self) -> None:
        registry = WordRegistry()
        words = [registry.add(f"w{i}") for i in range(len(WORD_COLORS) + 2)]
        self.assertEqual(words[len(WORD_COLORS)].color, WORD_COLORS[0])
        self.assertEqual(words[-1].color, WORD_COLORS[1])

    def test_color_counter_survives_removal(self) -> None:
        registry = WordRegistry()
        first = registry.add("one")
        registry.add("two")
        assert first is not None
        registry.remove(first.id)
        third = registry.add("three")
        assert third is not None
        self.assertEqual(third.color, WORD_COLORS[2])
        self.assertEqual(registry.next_color_index, 3)

    def test_rename_keeps_identity_and_color(self) -> None:
        registry = WordRegistry()
        word = registry.add("cat")
        assert word is not None
        renamed = registry.rename(word.id, " lion ")
        assert renamed is not None
        self.assertEqual(renamed.id, word.id)
        self.assertEqual(renamed.color, WORD_COLORS[0])
        self.assertEqual(renamed.text, "lion")
        self.assertIsNone(registry.rename(word.id, " "))
        self.assertEqual(registry.get(word.id).text, "lion")
        self.assertIsNone(registry.rename("missing", "x"))

    def test_index_of_uses_current_order(self) -> None:
        registry = WordRegistry()
        a = registry.add("a")
        b = registry.add("b")
        assert a is not None and b is not None
        self.assertEqual(registry.index_of(b.id), 1)
        registry.remove(a.id)
        self.assertEqual(registry.index_of(b.id), 0)
        self.assertEqual(registry.index_of(a.id), -1)

    def test_resolve_by_number_or_text(self) -> None:
        registry = WordRegistry()
        cat = registry.add("Cat")
        dog = registry.add("dog")
        self.assertIs(registry.resolve("1"), cat)
        self.assertIs(registry.resolve("DOG"), dog)
        self.assertIsNone(registry.resolve("3"))
        self.assertIsNone(registry.resolve("0"))
        self.assertIsNone(registry.resolve("bird"))

    def test_total_letters(self) -> None:
        registry = WordRegistry()
        registry.add("cat")
        registry.add("horse")
        self.assertEqual(registry.total_letters, 8)

    def test_custom_palette_must_not_be_empty(self) -> None:
        with self.assertRaises(ValueError):
            WordRegistry(palette=())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
