"""Deterministic rule validation for generated word grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set

from ..core.exceptions import ValidationError
from ..core.models import WordIndex
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Re-checks an emitted grid against the index it was searched from."""

    def __init__(self, index: WordIndex) -> None:
        self.index = index
        self._row_words = frozenset(index.row_words)

    def validate(self, grid: Sequence[str]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_shape(grid)
            self._check_rows(grid)
            self._check_columns(grid)
            self._check_letters_unique(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_shape(self, grid: Sequence[str]) -> None:
        if len(grid) != self.index.height:
            raise ValidationError(
                f"Grid has {len(grid)} rows, expected {self.index.height}"
            )
        width = self.index.width
        for r, row in enumerate(grid):
            if len(row) != width:
                raise ValidationError(f"Row {r} '{row}' has length {len(row)}, expected {width}")

    def _check_rows(self, grid: Sequence[str]) -> None:
        for r, row in enumerate(grid):
            if row not in self._row_words:
                raise ValidationError(f"Row {r} '{row}' is not a dictionary word")

    def _check_columns(self, grid: Sequence[str]) -> None:
        for c in range(self.index.width):
            column = "".join(row[c] for row in grid)
            for length in range(1, len(column) + 1):
                if not self.index.is_viable_column(column[:length]):
                    raise ValidationError(
                        f"Column {c} prefix '{column[:length]}' is not a column word prefix"
                    )
            if not self.index.is_column_word(column):
                raise ValidationError(f"Column {c} '{column}' is not a dictionary word")

    def _check_letters_unique(self, grid: Sequence[str]) -> None:
        seen: Set[str] = set()
        for r, row in enumerate(grid):
            for c, letter in enumerate(row):
                if not ("A" <= letter <= "Z"):
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")
                if letter in seen:
                    raise ValidationError(f"Letter '{letter}' reused at ({r},{c})")
                seen.add(letter)
