"""Word grid generation orchestration.

Two-phase approach:
  1. Index: filter the dictionary into sorted row words and column prefixes.
  2. Search: walk the backtracking solver and hand grids to the caller.
"""

from __future__ import annotations

import time
from itertools import islice
from typing import Iterable, Iterator, Optional

from ..core.exceptions import ValidationError
from ..core.models import Grid, GridConfig, WordIndex
from ..data.dictionary import build_word_index, load_word_index
from ..utils.logger import get_logger
from .solver import find_grids
from .validator import GridValidator


LOGGER = get_logger(__name__)


class WordGridGenerator:
    """High-level orchestrator: index building then grid search."""

    def __init__(
        self,
        config: GridConfig,
        index: Optional[WordIndex] = None,
        word_source: Optional[Iterable[str]] = None,
    ) -> None:
        # Reject bad dimensions before any dictionary is touched.
        config.validate()
        self.config = config
        self._index = index
        self._word_source = word_source
        self.grids_found = 0

    @property
    def index(self) -> WordIndex:
        if self._index is None:
            started = time.perf_counter()
            if self._word_source is not None:
                self._index = build_word_index(self._word_source, self.config)
            else:
                self._index = load_word_index(self.config)
            LOGGER.info(
                "Word index ready in %.1fms", (time.perf_counter() - started) * 1000
            )
        return self._index

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> Iterator[Grid]:
        """Yield grids lazily; stop consuming to end the search early."""

        index = self.index
        self.grids_found = 0
        if index.is_empty:
            LOGGER.warning(
                "No usable %d-letter row words or %d-letter column words",
                self.config.width,
                self.config.height,
            )
            return

        validator = GridValidator(index) if self.config.validate_grids else None
        grids: Iterator[Grid] = find_grids(index)
        if self.config.max_grids is not None:
            grids = islice(grids, self.config.max_grids)

        started = time.perf_counter()
        for grid in grids:
            if validator is not None:
                result = validator.validate(grid)
                if not result.ok:
                    raise ValidationError(f"Grid validation failed: {result.messages}")
            self.grids_found += 1
            yield grid
        LOGGER.info(
            "Search finished with %d grids in %.1fms",
            self.grids_found,
            (time.perf_counter() - started) * 1000,
        )
