"""Depth-first backtracking search for word grids.

Rows are placed one word at a time. After each placement the partial
columns must all be prefixes of some column word, and the candidate pool
for the next row loses every word sharing a letter with the placed one.
"""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterator, List, Optional, Sequence, Tuple

from ..core.models import Grid, WordIndex
from ..data.normalization import letter_mask
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def find_grids(index: WordIndex) -> Iterator[Grid]:
    """Yield every grid buildable from ``index`` in lexicographic row order."""

    return search(index.row_words, index.column_prefixes, index.height)


def search(
    row_words: Sequence[str],
    column_prefixes: Sequence[AbstractSet[str]],
    height: int,
) -> Iterator[Grid]:
    """Lazily enumerate grids of ``height`` rows drawn from ``row_words``.

    ``row_words`` must already be sorted; that order fixes the order of the
    emitted grids. ``column_prefixes[L - 1]`` holds the valid partial columns
    of length ``L``. An index covering fewer than ``height`` rows admits no
    complete column, so nothing is yielded.
    """

    if height <= 0 or not row_words or len(column_prefixes) < height:
        return
    width = len(row_words[0])
    masks = {word: letter_mask(word) for word in row_words}
    LOGGER.debug("Searching %dx%d grids over %d row words", width, height, len(row_words))
    yield from _extend((), ("",) * width, list(row_words), column_prefixes, height, masks)


def _extend(
    rows: Grid,
    columns: Tuple[str, ...],
    candidates: List[str],
    column_prefixes: Sequence[AbstractSet[str]],
    height: int,
    masks: Dict[str, int],
) -> Iterator[Grid]:
    depth = len(rows)
    last_row = depth == height - 1
    for word in candidates:
        next_columns = extend_columns(columns, word, column_prefixes)
        if next_columns is None:
            continue

        next_rows = rows + (word,)
        if last_row:
            yield next_rows
            continue

        next_candidates = reduce_candidates(candidates, word, masks)
        if not next_candidates:
            continue
        yield from _extend(next_rows, next_columns, next_candidates, column_prefixes, height, masks)


def extend_columns(
    columns: Sequence[str],
    word: str,
    column_prefixes: Sequence[AbstractSet[str]],
) -> Optional[Tuple[str, ...]]:
    """Append ``word`` below ``columns``; ``None`` if any column stops being a prefix."""

    length = len(columns[0]) + 1 if columns else 1
    if length > len(column_prefixes):
        return None
    valid = column_prefixes[length - 1]
    extended = []
    for column, letter in zip(columns, word):
        column += letter
        if column not in valid:
            return None
        extended.append(column)
    return tuple(extended)


def column_viable(
    rows: Sequence[str],
    word: str,
    column_prefixes: Sequence[AbstractSet[str]],
) -> bool:
    """Return ``True`` if ``word`` can go directly below ``rows``."""

    columns = tuple("".join(row[i] for row in rows) for i in range(len(word)))
    return extend_columns(columns, word, column_prefixes) is not None


def reduce_candidates(
    candidates: Sequence[str],
    word: str,
    masks: Optional[Dict[str, int]] = None,
) -> List[str]:
    """Drop every candidate that shares a letter with ``word``, keeping order."""

    if masks is None:
        masks = {}
    used = masks.get(word) or letter_mask(word)
    return [
        candidate
        for candidate in candidates
        if not (masks.get(candidate) or letter_mask(candidate)) & used
    ]
