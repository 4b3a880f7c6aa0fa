"""Shared constants for the word grid generator."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet

ALPHABET_LEN = 26

APOSTROPHE = "'"

DEFAULT_DICTIONARY_PATH = Path("/usr/share/dict/words")

# Words of this length or shorter must appear in LEGAL_SMALL_WORDS when the
# small-word restriction is active.
SMALL_WORD_MAX_LENGTH = 2

LEGAL_SMALL_WORDS: FrozenSet[str] = frozenset({
    "A", "I",
    "AH", "AM", "AN", "AS", "AT", "BE", "BY", "DC", "DO",
    "DR", "EX", "GO", "HA", "HE", "HI", "HO", "IF", "IN", "IS",
    "IT", "LA", "LO", "MA", "ME", "MR", "MS", "MY", "NO", "OF",
    "OH", "OK", "ON", "OR", "OW", "OX", "PA", "PI", "SO", "ST",
    "TO", "UP", "US", "WE",
})
