import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from wordgrid.core.exceptions import ConfigurationError, DictionaryLoadError, ValidationError
from wordgrid.core.models import GridConfig, WordIndex
from wordgrid.engine.generator import WordGridGenerator
from wordgrid.utils.pretty import format_grid, print_grid, print_grids

SQUARE_WORDS = ["ABC", "DEF", "GHI", "ADG", "BEH", "CFI"]


class GridConfigTests(unittest.TestCase):
    def test_rejects_oversized_grid(self) -> None:
        with self.assertRaises(ConfigurationError):
            GridConfig(width=6, height=5).validate()

    def test_rejects_non_positive_dimensions(self) -> None:
        with self.assertRaises(ConfigurationError):
            GridConfig(width=0, height=3).validate()
        with self.assertRaises(ConfigurationError):
            GridConfig(width=3, height=-1).validate()

    def test_rejects_non_integer_dimensions(self) -> None:
        with self.assertRaises(ConfigurationError):
            GridConfig(width="3", height=3).validate()  # type: ignore[arg-type]

    def test_accepts_largest_grid(self) -> None:
        GridConfig(width=13, height=2).validate()
        GridConfig(width=26, height=1).validate()


class GeneratorTests(unittest.TestCase):
    def test_oversized_grid_rejected_before_dictionary_read(self) -> None:
        source = MagicMock()
        with patch("wordgrid.engine.generator.load_word_index") as loader:
            with self.assertRaises(ConfigurationError):
                WordGridGenerator(GridConfig(width=9, height=3), word_source=source)
            loader.assert_not_called()
        source.__iter__.assert_not_called()

    def test_generate_from_word_source(self) -> None:
        config = GridConfig(width=3, height=3)
        generator = WordGridGenerator(config, word_source=SQUARE_WORDS)
        grids = list(generator.generate())
        self.assertEqual(grids, [("ABC", "DEF", "GHI"), ("ADG", "BEH", "CFI")])
        self.assertEqual(generator.grids_found, 2)

    def test_generate_from_dictionary_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "words"
            sample.write_text("\n".join(SQUARE_WORDS).lower() + "\n", encoding="utf-8")
            config = GridConfig(width=3, height=3, dictionary_path=sample, validate_grids=True)
            grids = list(WordGridGenerator(config).generate())
        self.assertEqual(grids[0], ("ABC", "DEF", "GHI"))

    def test_max_grids_stops_early(self) -> None:
        config = GridConfig(width=3, height=3, max_grids=1)
        generator = WordGridGenerator(config, word_source=SQUARE_WORDS)
        self.assertEqual(list(generator.generate()), [("ABC", "DEF", "GHI")])

    def test_repeated_runs_are_identical(self) -> None:
        config = GridConfig(width=3, height=3)
        first = list(WordGridGenerator(config, word_source=SQUARE_WORDS).generate())
        second = list(WordGridGenerator(config, word_source=SQUARE_WORDS).generate())
        self.assertEqual(first, second)

    def test_no_solutions_is_empty(self) -> None:
        config = GridConfig(width=3, height=3)
        generator = WordGridGenerator(config, word_source=["CAT", "DOG", "ACT"])
        self.assertEqual(list(generator.generate()), [])
        self.assertEqual(generator.grids_found, 0)

    def test_missing_dictionary(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = GridConfig(width=3, height=3, dictionary_path=Path(tmpdir) / "missing")
            generator = WordGridGenerator(config)
            with self.assertRaises(DictionaryLoadError):
                list(generator.generate())

    def test_validation_failure_raises(self) -> None:
        # Hand-built index whose column entry admits a letter-reusing grid.
        index = WordIndex(
            row_words=("AB",),
            column_prefixes=(frozenset({"A", "B"}), frozenset({"AA", "BB"})),
        )
        config = GridConfig(width=2, height=2, validate_grids=True)
        generator = WordGridGenerator(config, index=index)
        with patch(
            "wordgrid.engine.generator.find_grids", return_value=iter([("AB", "AB")])
        ):
            with self.assertRaises(ValidationError):
                list(generator.generate())


class PrettyTests(unittest.TestCase):
    def test_format_grid(self) -> None:
        self.assertEqual(format_grid(("ABC", "DEF")), "ABC\nDEF")

    def test_print_grid_appends_blank_line(self) -> None:
        stream = io.StringIO()
        print_grid(("AB", "CD"), stream=stream)
        self.assertEqual(stream.getvalue(), "AB\nCD\n\n")

    def test_print_grids_counts(self) -> None:
        stream = io.StringIO()
        count = print_grids([("A",), ("I",)], stream=stream)
        self.assertEqual(count, 2)
        self.assertEqual(stream.getvalue(), "A\n\nI\n\n")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
