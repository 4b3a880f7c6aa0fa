"""Pretty-print helpers for word grids."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence


def format_grid(grid: Sequence[str]) -> str:
    return "\n".join(grid)


def print_grid(grid: Sequence[str], *, stream=None) -> None:
    """Print one row per line followed by a blank separator line."""

    stream = stream or sys.stdout
    print(format_grid(grid), file=stream)
    print(file=stream)


def print_grids(grids: Iterable[Sequence[str]], *, stream=None) -> int:
    """Print grids as they arrive and return how many were printed."""

    stream = stream or sys.stdout
    count = 0
    for grid in grids:
        print_grid(grid, stream=stream)
        stream.flush()
        count += 1
    return count
