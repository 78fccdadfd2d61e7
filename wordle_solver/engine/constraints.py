"""
Feedback consistency given game history.

Given:
  - a candidate word
  - a history of Guess(word, mask) entries

A candidate is consistent with a Guess iff, were the candidate the secret,
guessing `guess.word` would have produced exactly `guess.mask`. It is
consistent with a history iff it is consistent with every entry.

This is the step that turns feedback into a shrinking candidate set.
"""

from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union

from .scoring import compute


class Guess(NamedTuple):
    """A guessed word and the correctness mask it produced."""
    word: str
    mask: str

    def matches(self, candidate: str) -> bool:
        """True if `candidate` could still be the secret after this guess."""
        return compute(candidate, self.word) == self.mask


# History entries may be Guess objects or bare (word, mask) tuples.
GuessLike = Union[Guess, Tuple[str, str]]
History = Sequence[GuessLike]


def is_consistent(history: Iterable[GuessLike], candidate: str) -> bool:
    for word, mask in history:
        if compute(candidate, word) != mask:
            return False
    return True


def filter_candidates(words: Iterable[str], history: Iterable[GuessLike]) -> List[str]:
    """
    Keep only words consistent with every (word, mask) in `history`.

    Order is preserved as in `words`.
    """
    history = list(history)
    return [w for w in words if is_consistent(history, w)]
