"""
Per-session working sets: the candidate pool and the pattern space.

Both start as a *borrowed* view of shared, read-only data (the frequency
table's entries, the tuple of all 243 masks) and become an *owned* private
list the first time they are filtered. Nothing is copied until then, and the
shared data is never touched.

    Borrowed(shared tuple) --first prune/retain--> Owned(private list)

Both only ever shrink.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Sequence, Tuple, TypeVar, Union

from .constraints import GuessLike
from .lexicon import Entry, FrequencyTable
from .scoring import PATTERNS, PATTERN_INDEX, compute

T = TypeVar("T")


class ContradictoryHistoryError(RuntimeError):
    """
    The history rules out every dictionary word (or every feedback pattern).

    Happens only when the secret is not in the dictionary or the feedback was
    wrong; there is no sensible guess to make.
    """


@dataclass(frozen=True)
class Borrowed(Generic[T]):
    data: Tuple[T, ...]


@dataclass
class Owned(Generic[T]):
    data: List[T]


Storage = Union[Borrowed[T], Owned[T]]


def _filter(storage: Storage, keep: Callable[[T], bool]) -> Owned:
    """Apply `keep`, promoting Borrowed storage to a private filtered copy."""
    if isinstance(storage, Owned):
        storage.data[:] = [x for x in storage.data if keep(x)]
        return storage
    return Owned([x for x in storage.data if keep(x)])


class CandidatePool:
    """Words (with weights) still consistent with everything guessed so far."""

    def __init__(self, table: FrequencyTable):
        self.table = table
        self._storage: Storage[Entry] = Borrowed(table.entries)

    @property
    def is_owned(self) -> bool:
        return isinstance(self._storage, Owned)

    @property
    def entries(self) -> Sequence[Entry]:
        return self._storage.data

    def __len__(self) -> int:
        return len(self._storage.data)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._storage.data)

    def words(self) -> List[str]:
        return [w for w, _ in self._storage.data]

    def total_weight(self) -> int:
        return sum(c for _, c in self._storage.data)

    def prune(self, last_guess: GuessLike) -> None:
        """
        Keep only entries consistent with `last_guess`.

        Earlier guesses were applied by earlier calls, so checking the newest
        one is enough.
        """
        word, mask = last_guess
        self._storage = _filter(self._storage, lambda e: compute(e[0], word) == mask)


class PatternSpace:
    """Masks that can still show up as feedback for the current pool."""

    def __init__(self, patterns: Tuple[str, ...] = PATTERNS):
        self._storage: Storage[str] = Borrowed(patterns)

    @property
    def is_owned(self) -> bool:
        return isinstance(self._storage, Owned)

    def __len__(self) -> int:
        return len(self._storage.data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage.data)

    def indices(self) -> List[int]:
        """Enumeration indices of the live masks, in enumeration order."""
        return [PATTERN_INDEX[p] for p in self._storage.data]

    def retain(self, reachable: Sequence[bool]) -> None:
        """
        Drop every mask whose flag in `reachable` (indexed by pattern_index)
        is false. Once empty, this does nothing.
        """
        if not self._storage.data:
            return
        self._storage = _filter(self._storage, lambda p: bool(reachable[PATTERN_INDEX[p]]))
