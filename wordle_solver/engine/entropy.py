"""
Entropy scoring (expected information gain) over the candidate pool.

For a word w and the current pool, every candidate c lands in the bucket of
the mask compute(c, w), i.e. the feedback we would see if c were the secret
and we guessed w. With bucket weights W_p and pool weight W:

    H(w) = - sum_p (W_p / W) * log2(W_p / W)      (empty buckets skipped)

The frequency-weighted variant multiplies H(w) by w's own prior
weight(w) / W, trading pure information for a better chance of hitting the
answer outright.

Two evaluation paths give the same numbers:
  - naive: for each pattern, scan the pool and sum matching weights
    (|pool| * 243 oracle calls per word).
  - bucketed (default): one oracle call per candidate, weights summed per
    pattern with numpy.bincount, then the entropy is accumulated over the live
    patterns in enumeration order. Bucket totals are sums of integer weights,
    so both paths add the very same floats in the very same order.
"""

from __future__ import annotations

from math import log2
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .constraints import Guess
from .lexicon import FrequencyTable
from .pool import CandidatePool, PatternSpace
from .scoring import NUM_PATTERNS, PATTERNS, PATTERN_INDEX, compute_index

DEFAULT_LOOKUP_LIMIT = 1024


class PairwiseLookup:
    """
    Precomputed feedback codes for the `limit` heaviest dictionary words.

    Each unordered pair {a, b} is visited once and both directions,
    compute(a, b) and compute(b, a), are stored. Lookups outside the cached
    words fall back to the oracle. Built once, then read-only; share one
    instance between as many sessions as you like.
    """

    def __init__(self, words: Sequence[str], codes: np.ndarray):
        self._index: Dict[str, int] = {w: i for i, w in enumerate(words)}
        self._codes = codes
        self._codes.setflags(write=False)

    @classmethod
    def build(cls, table: FrequencyTable, limit: int = DEFAULT_LOOKUP_LIMIT) -> "PairwiseLookup":
        words = table.top(limit)
        n = len(words)
        codes = np.empty((n, n), dtype=np.uint8)
        for i, a in enumerate(words):
            for j in range(i, n):
                b = words[j]
                codes[i, j] = compute_index(a, b)
                codes[j, i] = compute_index(b, a)
        return cls(words, codes)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def code(self, answer: str, guess: str) -> int:
        """pattern_index(compute(answer, guess)), from the cache when possible."""
        i = self._index.get(answer)
        j = self._index.get(guess)
        if i is None or j is None:
            return compute_index(answer, guess)
        return int(self._codes[i, j])


class Ranking(NamedTuple):
    """Goodness of every pool word (pool order) plus the masks that occurred."""
    scores: List[Tuple[str, float]]
    reachable: List[bool]


def _live_indices(patterns: Optional[Iterable[str]]) -> List[int]:
    if patterns is None:
        return list(range(NUM_PATTERNS))
    if isinstance(patterns, PatternSpace):
        return patterns.indices()
    return [PATTERN_INDEX[p] for p in patterns]


def _entropy(totals: Sequence[float], live: Iterable[int], total_weight: float) -> float:
    s = 0.0
    for i in live:
        t = totals[i]
        if t == 0:
            continue
        prob = t / total_weight
        s += prob * log2(prob)
    return 0.0 - s


class EntropyScorer:
    """
    Score guesses against a CandidatePool.

    Args:
      weighted : multiply the entropy by the word's prior probability
      naive    : use the literal pattern-by-pattern scan
      lookup   : optional PairwiseLookup shared across sessions
    """

    def __init__(self, *, weighted: bool = False, naive: bool = False,
                 lookup: Optional[PairwiseLookup] = None):
        self.weighted = weighted
        self.naive = naive
        self.lookup = lookup

    def _code(self, answer: str, guess: str) -> int:
        if self.lookup is not None:
            return self.lookup.code(answer, guess)
        return compute_index(answer, guess)

    def bucket_totals(self, word: str, pool: CandidatePool) -> List[float]:
        """Weight of the pool landing in each of the 243 pattern buckets."""
        entries = pool.entries
        if not entries:
            return [0.0] * NUM_PATTERNS
        codes = [self._code(c, word) for c, _ in entries]
        weights = [w for _, w in entries]
        return np.bincount(codes, weights=weights, minlength=NUM_PATTERNS).tolist()

    def _naive_totals(self, word: str, pool: CandidatePool, live: Iterable[int]) -> List[int]:
        totals = [0] * NUM_PATTERNS
        for i in live:
            g = Guess(word, PATTERNS[i])
            in_pattern_total = 0
            for candidate, count in pool:
                if g.matches(candidate):
                    in_pattern_total += count
            totals[i] = in_pattern_total
        return totals

    def entropy(self, word: str, pool: CandidatePool,
                patterns: Optional[Iterable[str]] = None) -> float:
        """Shannon entropy (bits) of the feedback distribution for `word`."""
        return self._entropy_and_totals(word, pool, _live_indices(patterns), pool.total_weight())[0]

    def _entropy_and_totals(self, word: str, pool: CandidatePool, live: List[int],
                            total_weight: int) -> Tuple[float, Sequence[float]]:
        if total_weight <= 0:
            return 0.0, [0] * NUM_PATTERNS
        if self.naive:
            totals = self._naive_totals(word, pool, live)
        else:
            totals = self.bucket_totals(word, pool)
        return _entropy(totals, live, total_weight), totals

    def score(self, word: str, pool: CandidatePool,
              patterns: Optional[Iterable[str]] = None) -> float:
        """
        Goodness of guessing `word`: the entropy, times the word's prior when
        this scorer is weighted.

        The prior is the dictionary weight of `word` over the pool's weight, so
        a word already pruned from the pool keeps its frequency.
        """
        total_weight = pool.total_weight()
        h = self.entropy(word, pool, patterns)
        if not self.weighted or total_weight <= 0:
            return h
        table = pool.table
        prior = table.weight(word) if word in table else 0
        return (prior / total_weight) * h

    def rank(self, pool: CandidatePool, patterns: Optional[Iterable[str]] = None) -> Ranking:
        """
        Score every pool word, in pool order.

        Also reports, per enumeration index, whether any scored word put
        non-zero weight in that pattern's bucket; masks that never do are
        unreachable from here on.
        """
        live = _live_indices(patterns)
        total_weight = pool.total_weight()
        reachable = [False] * NUM_PATTERNS
        scores: List[Tuple[str, float]] = []

        for word, count in pool:
            h, totals = self._entropy_and_totals(word, pool, live, total_weight)
            for i in live:
                if totals[i]:
                    reachable[i] = True
            if self.weighted and total_weight > 0:
                h = (count / total_weight) * h
            scores.append((word, h))

        return Ranking(scores, reachable)
