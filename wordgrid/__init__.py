"""Word grid generator package.

This package exposes the public API surface via:

- ``wordgrid.engine.generator.WordGridGenerator``: builds the index and runs the search.
- ``wordgrid.data.dictionary.build_word_index``: filters raw words into a ``WordIndex``.
- ``wordgrid.engine.solver.find_grids``: the backtracking search itself.
"""

from .core.models import GridConfig, WordIndex
from .data.dictionary import build_word_index, load_word_index
from .engine.generator import WordGridGenerator
from .engine.solver import find_grids, search

__all__ = [
    "GridConfig",
    "WordIndex",
    "WordGridGenerator",
    "build_word_index",
    "load_word_index",
    "find_grids",
    "search",
]

__version__ = "0.1.0"
