"""Shared helpers for dictionary word normalization."""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import APOSTROPHE, LEGAL_SMALL_WORDS, SMALL_WORD_MAX_LENGTH

WORD_RE = re.compile(r"[A-Za-z]+")


def has_unique_letters(word: str) -> bool:
    """Return ``True`` when no letter occurs twice in ``word``."""

    seen = []
    for char in word:
        if char in seen:
            return False
        seen.append(char)
    return True


def normalize_word(text: str, strip_apostrophes: bool = False) -> Optional[str]:
    """Return the uppercase form of ``text`` or ``None`` if it cannot be a grid word.

    Words containing anything other than ASCII letters (after the optional
    apostrophe removal) and words with a repeated letter are rejected.
    """

    word = text.rstrip("\r\n")
    if strip_apostrophes:
        word = word.replace(APOSTROPHE, "")
    if not WORD_RE.fullmatch(word):
        return None
    word = word.upper()
    if not has_unique_letters(word):
        return None
    return word


def is_allowed_short_word(word: str) -> bool:
    """Return ``False`` for short words missing from the allow-list."""

    return len(word) > SMALL_WORD_MAX_LENGTH or word in LEGAL_SMALL_WORDS


def letter_mask(word: str) -> int:
    """Encode the letters of an uppercase word as a 26-bit set."""

    mask = 0
    for char in word:
        mask |= 1 << (ord(char) - ord("A"))
    return mask


__all__ = ["has_unique_letters", "is_allowed_short_word", "letter_mask", "normalize_word"]
