"""
Correctness masks (feedback) for a single (answer, guess) pair.

Conventions:
  - 'C' : correct   = right letter in the right position
  - 'M' : misplaced = letter occurs elsewhere in the answer
  - 'W' : wrong     = letter not present (or present fewer times than guessed)

A mask is a plain 5-character string such as "CMWWC". Strings are immutable,
hashable and cheap to compare, which is all the engine needs from them.

Algorithm (two-pass):
  1) Exact pass marks every position where answer and guess agree and
     consumes that answer slot.
  2) Misplaced pass walks the remaining guess positions and consumes the
     first unconsumed answer slot holding the same letter. This is what makes
     duplicate letters come out right.

Operand order matters: compute(a, b) != compute(b, a) in general.
"""

from __future__ import annotations

from itertools import product
from typing import Dict, Iterator, Literal, Tuple

WORD_LENGTH = 5

CORRECT = "C"
MISPLACED = "M"
WRONG = "W"

# Type alias for clarity; each mask character is one of 'C', 'M', 'W'
MaskChar = Literal["C", "M", "W"]

ALL_CORRECT = CORRECT * WORD_LENGTH


class MaskParseError(ValueError):
    """Raised when a human-entered mask is not 5 symbols over {C, M, W}."""


def compute(answer: str, guess: str) -> str:
    """
    Compute the correctness mask of `guess` when the secret is `answer`.

    Examples:
      compute("aabbb", "ccaac") -> "WWMMW"
      compute("aabbb", "caacc") -> "WCMWW"
      compute("abcde", "eabcd") -> "MMMMM"
    """
    if len(answer) != WORD_LENGTH or len(guess) != WORD_LENGTH:
        raise ValueError(
            f"answer and guess must be {WORD_LENGTH} letters; got {answer!r}, {guess!r}")

    mask = [WRONG] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1: exact matches consume their own answer slot
    for i in range(WORD_LENGTH):
        if answer[i] == guess[i]:
            mask[i] = CORRECT
            used[i] = True

    # Pass 2: first unconsumed occurrence wins
    for i in range(WORD_LENGTH):
        if mask[i] == CORRECT:
            continue
        g = guess[i]
        for j in range(WORD_LENGTH):
            if not used[j] and answer[j] == g:
                mask[i] = MISPLACED
                used[j] = True
                break

    return "".join(mask)


def enumerate_patterns() -> Iterator[str]:
    """
    Yield all 3**5 = 243 masks in a fixed order (CCCCC, CCCCM, CCCCW, ...).

    Calling it again restarts the sequence. Some masks are unreachable
    (e.g. four Correct and one Misplaced); they are not filtered here.
    """
    for combo in product((CORRECT, MISPLACED, WRONG), repeat=WORD_LENGTH):
        yield "".join(combo)


# Shared, read-only views of the enumeration
PATTERNS: Tuple[str, ...] = tuple(enumerate_patterns())
PATTERN_INDEX: Dict[str, int] = {p: i for i, p in enumerate(PATTERNS)}
NUM_PATTERNS = len(PATTERNS)


def pattern_index(mask: str) -> int:
    """Position of `mask` in enumerate_patterns() order (base 3, C=0 M=1 W=2)."""
    return PATTERN_INDEX[mask]


def compute_index(answer: str, guess: str) -> int:
    return PATTERN_INDEX[compute(answer, guess)]


def parse_mask(text: str) -> str:
    """
    Convert a user-typed mask ("cmwwC", "CCMWW", ...) to a canonical mask.

    Raises MaskParseError on a wrong length or an unknown symbol so the caller
    can ask again.
    """
    s = text.strip().upper()
    if len(s) != WORD_LENGTH:
        raise MaskParseError(f"correctness masks must be {WORD_LENGTH} characters; got {text!r}")
    for ch in s:
        if ch not in (CORRECT, MISPLACED, WRONG):
            raise MaskParseError(f"invalid correctness: {ch.lower()!r}")
    return s
