"""
Entropy Solver (expected information gain).

Main idea:
  - Turn 1 is hardcoded: scoring every word against the unconstrained
    dictionary always lands on the same answer, so the precomputed opening
    word is returned without touching the pool or the scorer.
  - Every later turn: prune the candidate pool against the newest feedback,
    score every remaining candidate, guess the best one.
Tie-break:
  - first winner in pool order (which is dictionary order, so runs are
    reproducible).

The historical variants of this solver differ only in how much work they
avoid; they are registered below as configurations of the same engine:

  unoptimized : literal pattern-by-pattern scan over the pool
  vecrem      : one oracle call per candidate, weights bucketed per pattern
  precalc     : vecrem + a shared pairwise feedback cache
  weight      : vecrem, goodness multiplied by the word's prior
  prune       : weight + dropping masks that can no longer occur (default)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from wordle_solver.engine import (
    CandidatePool, ContradictoryHistoryError, EntropyScorer, FrequencyTable,
    PairwiseLookup, PatternSpace,
)
from wordle_solver.engine.constraints import History
from wordle_solver.engine.entropy import DEFAULT_LOOKUP_LIMIT
from .base import BaseSolver, SessionState, register

log = logging.getLogger(__name__)

DEFAULT_OPENING = "tares"


@dataclass(frozen=True)
class EntropyConfig:
    """Knobs for one entropy solver variant. All combinations are valid."""
    opening: str = DEFAULT_OPENING
    weighted: bool = False          # multiply entropy by the word's prior
    prune_patterns: bool = False    # track and drop unreachable masks
    naive: bool = False             # pattern-by-pattern scan instead of bucketing
    use_lookup: bool = False        # consult a PairwiseLookup (built if not supplied)
    lookup_limit: int = DEFAULT_LOOKUP_LIMIT


def _pick_best(scores: List[Tuple[str, float]]) -> Tuple[str, float]:
    """First-encountered maximum."""
    best_word, best_goodness = scores[0]
    for word, goodness in scores[1:]:
        if goodness > best_goodness:
            best_word, best_goodness = word, goodness
    return best_word, best_goodness


class EntropySolver(BaseSolver):
    """Selector/engine shared by every registered entropy variant."""
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"

    config = EntropyConfig()

    def __init__(self, config: Optional[EntropyConfig] = None):
        super().__init__()
        if config is not None:
            self.config = config
        self.pool: Optional[CandidatePool] = None
        self.patterns: Optional[PatternSpace] = None
        self.scorer: Optional[EntropyScorer] = None
        self._applied = 0
        # (table, lookup) built by this solver; reused while the table is the same
        self._built: Optional[Tuple[FrequencyTable, PairwiseLookup]] = None

    def _lookup_for(self, table: FrequencyTable) -> PairwiseLookup:
        if self._built is None or self._built[0] is not table:
            log.info("building pairwise lookup for %d words",
                     min(len(table), self.config.lookup_limit))
            self._built = (table, PairwiseLookup.build(table, limit=self.config.lookup_limit))
        return self._built[1]

    def reset(self, *, table: FrequencyTable, lookup: Optional[PairwiseLookup] = None) -> None:
        """Start a new game: fresh pool and pattern space over `table`."""
        cfg = self.config
        if cfg.use_lookup and lookup is None:
            lookup = self._lookup_for(table)
        super().reset(table=table, lookup=lookup)

        self.pool = CandidatePool(table)
        self.patterns = PatternSpace() if cfg.prune_patterns else None
        self.scorer = EntropyScorer(
            weighted=cfg.weighted,
            naive=cfg.naive,
            lookup=lookup if cfg.use_lookup else None,
        )
        self._applied = 0

    def _apply_feedback(self, history: History) -> None:
        """Prune against every entry not seen yet (normally just the newest)."""
        if len(history) < self._applied:
            raise ValueError("history is append-only; it shrank between calls")
        for g in history[self._applied:]:
            self.pool.prune(g)
        self._applied = len(history)

    def next_guess(self, history: History) -> str:
        self._check_active()

        if not history:
            self.state = SessionState.OPENED
            return self.config.opening

        self._apply_feedback(history)
        self.state = SessionState.GUESSING

        if len(self.pool) == 0:
            raise ContradictoryHistoryError(
                f"no dictionary word is consistent with {len(history)} guess(es); "
                "the secret is not in the dictionary or the feedback is wrong")

        if self.patterns is not None and len(self.patterns) == 0:
            raise ContradictoryHistoryError("every feedback pattern has been ruled out")

        ranking = self.scorer.rank(self.pool, self.patterns)
        # an all-zero-weight pool says nothing about which masks can occur
        if self.patterns is not None and self.pool.total_weight() > 0:
            self.patterns.retain(ranking.reachable)

        word, goodness = _pick_best(ranking.scores)
        log.debug("turn %d: %d candidates, %s patterns live, guess %r (%.4f)",
                  len(history) + 1, len(self.pool),
                  len(self.patterns) if self.patterns is not None else "all",
                  word, goodness)
        return word


def best_opening(table: FrequencyTable, config: EntropyConfig = EntropyConfig()) -> str:
    """
    Score every dictionary word against the full, unconstrained table.

    This is what the hardcoded opening word stands in for; run it offline
    when switching dictionaries. Expensive: |table|^2 oracle calls.
    """
    scorer = EntropyScorer(weighted=config.weighted, naive=config.naive)
    ranking = scorer.rank(CandidatePool(table))
    return _pick_best(ranking.scores)[0]


@register
class UnoptimizedSolver(EntropySolver):
    id = "unoptimized"
    name = "Entropy (naive pattern scan)"
    config = EntropyConfig(naive=True)


@register
class VecremSolver(EntropySolver):
    id = "vecrem"
    name = "Entropy (bucketed)"
    config = EntropyConfig()


@register
class PreCalcSolver(EntropySolver):
    id = "precalc"
    name = "Entropy (pairwise lookup)"
    config = EntropyConfig(use_lookup=True)


@register
class WeightSolver(EntropySolver):
    id = "weight"
    name = "Entropy (frequency weighted)"
    config = EntropyConfig(weighted=True)


@register
class PruneSolver(EntropySolver):
    id = "prune"
    name = "Entropy (weighted, pattern pruning)"
    config = EntropyConfig(weighted=True, prune_patterns=True)
