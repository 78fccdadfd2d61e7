"""
Lightweight guess validation.

This module answers the question: "Is this word an acceptable guess?"
A guess is valid iff:
  - it is a string
  - it is lowercase a-z only
  - it has exactly WORD_LENGTH letters
  - it exists in the provided dictionary (a FrequencyTable or any container)

The harness uses this to reject solvers that invent words.
"""

from typing import Container

from .scoring import WORD_LENGTH


def is_word(word: object) -> bool:
    """Shape check only: a 5-letter lowercase ASCII string."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and word.isascii()
        and word.isalpha()
        and word.islower()
    )


def validate_guess(word: object, allowed: Container[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    `allowed` only needs membership tests; pass the FrequencyTable itself
    rather than building a list of its words.
    """
    return is_word(word) and word in allowed
