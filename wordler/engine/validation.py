"""
Lightweight word validation.

This module answers the question: "Is this a word the model can reason about?"
A word is well-formed iff:
  - it is a string
  - it is alphabetic A-Z only (ASCII; accented letters are rejected)
  - it has exact length WORD_LENGTH

Words are canonicalised to uppercase everywhere in the core.
"""

import string
from typing import Optional

WORD_LENGTH = 5
ALPHABET = frozenset(string.ascii_uppercase)


def normalize_word(word: str) -> str:
    """Strip whitespace and uppercase. Does not validate."""
    return word.strip().upper()


def is_well_formed(word: object, N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a WORD_LENGTH string made only of A-Z
    (case-insensitive).

    Examples:
      is_well_formed("crane") -> True
      is_well_formed("cranes") -> False
      is_well_formed("cr4ne") -> False
    """
    if not isinstance(word, str):
        return False

    w = normalize_word(word)
    return len(w) == N and all(ch in ALPHABET for ch in w)


def validate_guess(word: object, allowed: Optional[object] = None, N: int = WORD_LENGTH) -> bool:
    """
    Well-formedness plus (optional) membership in `allowed`.

    `allowed` may be any container of uppercase words, e.g. the model's
    remaining candidates. Passing None skips the membership check.
    """
    if not is_well_formed(word, N):
        return False
    if allowed is None:
        return True
    return normalize_word(word) in allowed
