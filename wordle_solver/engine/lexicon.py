"""Shared word -> weight table.

A FrequencyTable is built once (usually from the dictionary file, see
`wordle_solver.datasets.io.load_frequency_table`) and then only read. Every
session borrows its entries; nothing in the engine ever mutates it.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple

from .validation import is_word

Entry = Tuple[str, int]


class FrequencyTable:
    """Ordered, immutable (word, weight) entries with unique words.

    Iteration follows insertion order, so every consumer sees the same
    sequence and ties between equally good guesses resolve the same way on
    every run.
    """

    __slots__ = ("_entries", "_weights", "_total")

    def __init__(self, entries: Iterable[Entry]):
        items: List[Entry] = []
        weights: Dict[str, int] = {}
        for word, weight in entries:
            if not is_word(word):
                raise ValueError(f"not a 5-letter lowercase word: {word!r}")
            if weight < 0:
                raise ValueError(f"negative weight for {word!r}: {weight}")
            if word in weights:
                raise ValueError(f"duplicate word: {word!r}")
            weights[word] = weight
            items.append((word, weight))
        self._entries: Tuple[Entry, ...] = tuple(items)
        self._weights = weights
        self._total = sum(weights.values())

    @classmethod
    def from_pairs(cls, pairs: Iterable[Entry]) -> "FrequencyTable":
        return cls(pairs)

    @classmethod
    def uniform(cls, words: Iterable[str], weight: int = 1) -> "FrequencyTable":
        """Every word gets the same weight (handy for plain word lists)."""
        return cls((w, weight) for w in words)

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._weights

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"FrequencyTable({len(self)} words, total_weight={self._total})"

    def weight(self, word: str) -> int:
        return self._weights[word]

    def words(self) -> List[str]:
        return [w for w, _ in self._entries]

    def total_weight(self) -> int:
        return self._total

    def top(self, n: int) -> List[str]:
        """The `n` heaviest words; equal weights keep table order."""
        ranked = sorted(self._entries, key=lambda e: e[1], reverse=True)
        return [w for w, _ in ranked[:n]]
