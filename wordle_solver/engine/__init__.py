from .scoring import (
    ALL_CORRECT, CORRECT, MISPLACED, WRONG, PATTERNS, MaskParseError,
    compute, compute_index, enumerate_patterns, parse_mask, pattern_index,
)
from .constraints import Guess, is_consistent, filter_candidates
from .validation import validate_guess
from .lexicon import FrequencyTable
from .pool import CandidatePool, PatternSpace, ContradictoryHistoryError
from .entropy import EntropyScorer, PairwiseLookup

__all__ = [
    "ALL_CORRECT", "CORRECT", "MISPLACED", "WRONG", "PATTERNS", "MaskParseError",
    "compute", "compute_index", "enumerate_patterns", "parse_mask", "pattern_index",
    "Guess", "is_consistent", "filter_candidates", "validate_guess",
    "FrequencyTable", "CandidatePool", "PatternSpace", "ContradictoryHistoryError",
    "EntropyScorer", "PairwiseLookup",
]
