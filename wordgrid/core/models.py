"""Data models supporting the word grid generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional, Tuple

from .constants import ALPHABET_LEN, DEFAULT_DICTIONARY_PATH
from .exceptions import ConfigurationError

Grid = Tuple[str, ...]


@dataclass
class GridConfig:
    """Settings for a single generation run."""

    width: int
    height: int
    dictionary_path: Path | str = DEFAULT_DICTIONARY_PATH
    # When disabled (the default), apostrophes are stripped from words instead
    # of the word being dropped for containing a non-letter.
    allow_apostrophes: bool = False
    restrict_short_words: bool = True
    max_grids: Optional[int] = None
    validate_grids: bool = False

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` if the settings cannot be searched."""

        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"Invalid integer for {name} argument: {value!r}")
            if value <= 0:
                raise ConfigurationError(
                    f"{name.capitalize()} is too small. Must be > 0 (got {value})"
                )
        if self.width * self.height > ALPHABET_LEN:
            raise ConfigurationError(
                f"Width x Height is too large. Must be <= {ALPHABET_LEN} "
                f"(got {self.width} x {self.height} = {self.width * self.height})"
            )
        if self.max_grids is not None and self.max_grids < 0:
            raise ConfigurationError(f"max_grids must be >= 0 (got {self.max_grids})")


@dataclass(frozen=True)
class WordIndex:
    """Sorted row words plus per-length column prefix sets.

    ``column_prefixes[L - 1]`` holds every length-``L`` prefix of every
    column word, so a partial column of length ``L`` is viable only if it
    appears there.
    """

    row_words: Tuple[str, ...]
    column_prefixes: Tuple[FrozenSet[str], ...]
    column_word_count: int = field(default=0, compare=False)

    @property
    def height(self) -> int:
        return len(self.column_prefixes)

    @property
    def width(self) -> int:
        return len(self.row_words[0]) if self.row_words else 0

    @property
    def is_empty(self) -> bool:
        return not self.row_words or not self.column_prefixes or not self.column_prefixes[-1]

    def is_viable_column(self, column: str) -> bool:
        length = len(column)
        if length == 0 or length > self.height:
            return False
        return column in self.column_prefixes[length - 1]

    def is_column_word(self, column: str) -> bool:
        return len(column) == self.height and self.is_viable_column(column)
