from math import log2

import pytest
from wordle_solver.engine import (
    CandidatePool, EntropyScorer, FrequencyTable, Guess, PairwiseLookup, PatternSpace,
    compute, compute_index,
)

WORDS = [("crane", 80), ("raise", 60), ("stare", 45), ("trace", 30), ("cared", 25),
         ("racer", 12), ("scoop", 8), ("level", 6), ("right", 4), ("wrong", 2)]


def _pool(words=WORDS):
    return CandidatePool(FrequencyTable.from_pairs(words))


def test_entropy_is_non_negative():
    pool = _pool()
    for scorer in (EntropyScorer(), EntropyScorer(weighted=True), EntropyScorer(naive=True)):
        for word, _ in WORDS:
            assert scorer.score(word, pool) >= 0.0


def test_single_candidate_scores_zero():
    pool = _pool([("crane", 3)])
    assert EntropyScorer().score("crane", pool) == 0.0
    assert EntropyScorer(naive=True).score("crane", pool) == 0.0


def test_word_inducing_one_pattern_scores_zero():
    # no letter of "lumpy" appears in either candidate: always WWWWW
    pool = _pool([("crane", 5), ("trace", 7)])
    assert EntropyScorer().score("lumpy", pool) == 0.0


def test_entropy_matches_hand_computation():
    # crane vs trace yields two distinct masks, weights 1:3
    pool = _pool([("crane", 1), ("trace", 3)])
    expected = -(0.25 * log2(0.25) + 0.75 * log2(0.75))
    assert EntropyScorer().score("crane", pool) == pytest.approx(expected)


def test_naive_and_bucketed_agree():
    pool = _pool()
    pool.prune(Guess("level", compute("crane", "level")))
    fast, naive = EntropyScorer(), EntropyScorer(naive=True)
    for word in pool.words():
        assert fast.score(word, pool) == pytest.approx(naive.score(word, pool), abs=1e-12)


def test_weighted_score_is_prior_times_entropy():
    pool = _pool()
    plain, weighted = EntropyScorer(), EntropyScorer(weighted=True)
    total = pool.total_weight()
    for word, count in WORDS:
        assert weighted.score(word, pool) == pytest.approx(count / total * plain.score(word, pool))


def test_weighted_prior_comes_from_the_dictionary():
    table = FrequencyTable.from_pairs(WORDS)
    pool = CandidatePool(table)
    pool.prune(Guess("scoop", compute("crane", "scoop")))
    assert pool.words() == ["crane", "trace", "cared", "racer"]

    # raise was pruned but still splits the pool
    plain = EntropyScorer().score("raise", pool)
    assert plain > 0
    weighted = EntropyScorer(weighted=True).score("raise", pool)
    assert weighted == pytest.approx(60 / pool.total_weight() * plain)


def test_restricting_to_reachable_patterns_changes_nothing():
    pool = _pool()
    scorer = EntropyScorer(weighted=True)
    ranking = scorer.rank(pool)

    space = PatternSpace()
    space.retain(ranking.reachable)
    assert 0 < len(space) < 243
    assert "CCCCC" in list(space)

    restricted = scorer.rank(pool, space)
    assert restricted.scores == ranking.scores


def test_rank_follows_pool_order():
    pool = _pool()
    ranking = EntropyScorer().rank(pool)
    assert [w for w, _ in ranking.scores] == pool.words()


def test_zero_total_weight_scores_zero():
    pool = _pool([("crane", 0), ("trace", 0)])
    ranking = EntropyScorer(weighted=True).rank(pool)
    assert [g for _, g in ranking.scores] == [0.0, 0.0]


def test_pairwise_lookup_matches_oracle():
    table = FrequencyTable.from_pairs(WORDS)
    lookup = PairwiseLookup.build(table, limit=6)
    assert len(lookup) == 6
    assert "crane" in lookup and "wrong" not in lookup
    for a, _ in WORDS:
        for b, _ in WORDS:
            assert lookup.code(a, b) == compute_index(a, b)


def test_lookup_scorer_agrees_with_oracle_scorer():
    table = FrequencyTable.from_pairs(WORDS)
    lookup = PairwiseLookup.build(table, limit=len(table))
    pool = CandidatePool(table)
    assert EntropyScorer(lookup=lookup).rank(pool) == EntropyScorer().rank(pool)
