"""Dictionary reading and word index construction."""

from __future__ import annotations

import time
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Set, Tuple

from ..core.exceptions import DictionaryLoadError
from ..core.models import GridConfig, WordIndex
from ..utils.logger import get_logger
from .normalization import is_allowed_short_word, normalize_word

LOGGER = get_logger(__name__)


def iter_dictionary_words(path: Path | str) -> Iterator[str]:
    """Yield raw lines from a newline-delimited word list.

    Undecodable bytes are replaced rather than raised so that such lines are
    later rejected as non-letter words.
    """

    source = Path(path)
    try:
        with source.open("r", encoding="utf-8", errors="replace") as handle:
            for line in handle:
                yield line
    except OSError as exc:
        raise DictionaryLoadError(source, exc.strerror or str(exc)) from exc


def build_word_index(words: Iterable[str], config: GridConfig) -> WordIndex:
    """Filter ``words`` into sorted row words and column prefix sets.

    Any ``OSError`` raised by the word source aborts the build; nothing read
    before the fault is kept.
    """

    row_words: Set[str] = set()
    col_words: Set[str] = set()
    strip_apostrophes = not config.allow_apostrophes
    seen = 0
    rejected = 0

    try:
        for raw in words:
            seen += 1
            word = normalize_word(raw, strip_apostrophes=strip_apostrophes)
            if word is None:
                rejected += 1
                continue
            if config.restrict_short_words and not is_allowed_short_word(word):
                rejected += 1
                continue

            # A word may land in both sets when width == height.
            if len(word) == config.width:
                row_words.add(word)
            if len(word) == config.height:
                col_words.add(word)
    except OSError as exc:
        path = getattr(exc, "filename", None) or config.dictionary_path
        raise DictionaryLoadError(path, exc.strerror or str(exc)) from exc

    prefixes: List[Set[str]] = [set() for _ in range(config.height)]
    for col in col_words:
        for length in range(1, config.height + 1):
            prefixes[length - 1].add(col[:length])

    LOGGER.info(
        "Indexed %d row words (length %d) and %d column words (length %d) from %d lines",
        len(row_words),
        config.width,
        len(col_words),
        config.height,
        seen,
    )
    LOGGER.debug("Rejected %d dictionary lines", rejected)

    column_prefixes: Tuple[FrozenSet[str], ...] = tuple(frozenset(entry) for entry in prefixes)
    return WordIndex(
        row_words=tuple(sorted(row_words)),
        column_prefixes=column_prefixes,
        column_word_count=len(col_words),
    )


def load_word_index(config: GridConfig) -> WordIndex:
    """Read ``config.dictionary_path`` and build its :class:`WordIndex`."""

    source = Path(config.dictionary_path)
    started = time.perf_counter()
    index = build_word_index(iter_dictionary_words(source), config)
    LOGGER.debug("Word index for %s built in %.1fms", source, (time.perf_counter() - started) * 1000)
    return index
