import pytest
from wordle_solver.engine import (
    ALL_CORRECT, Guess, MaskParseError, PATTERNS, compute, enumerate_patterns,
    filter_candidates, is_consistent, parse_mask, pattern_index, validate_guess,
)

# --- golden masks: compute(answer, guess) ---
@pytest.mark.parametrize("answer,guess,expected", [
    ("abcde", "abcde", "CCCCC"),
    ("abcde", "qwxyz", "WWWWW"),
    ("abcde", "eabcd", "MMMMM"),
    ("aabbb", "aaccc", "CCWWW"),
    ("aabbb", "ccaac", "WWMMW"),
    ("aabbb", "caacc", "WCMWW"),
    ("azzaz", "aaabb", "CMWWW"),
    ("baccc", "aaddd", "WCWWW"),
    ("abcde", "aacde", "CWCCC"),
])
def test_compute_golden(answer, guess, expected):
    assert compute(answer, guess) == expected

def test_compute_operand_order_matters():
    assert compute("aabbb", "ccaac") != compute("ccaac", "aabbb")

@pytest.mark.parametrize("word", ["crane", "aaaaa", "level", "right", "tares"])
def test_compute_self_is_all_correct(word):
    assert compute(word, word) == ALL_CORRECT

@pytest.mark.parametrize("answer,guess", [
    ("crane", "lumpy"), ("crane", "split"), ("aabbb", "ccddd"), ("level", "mount"),
    ("crane", "slate"), ("abcde", "eabcd"), ("right", "wrong"),
])
def test_compute_all_wrong_iff_no_shared_letters(answer, guess):
    all_wrong = compute(answer, guess) == "WWWWW"
    assert all_wrong == (not set(answer) & set(guess))

def test_compute_rejects_bad_lengths():
    with pytest.raises(ValueError):
        compute("abcd", "abcde")

def test_enumerate_patterns_is_complete_and_restartable():
    first = list(enumerate_patterns())
    assert len(first) == 243 and len(set(first)) == 243
    assert first[0] == "CCCCC" and first[1] == "CCCCM" and first[-1] == "WWWWW"
    assert list(enumerate_patterns()) == first == list(PATTERNS)
    assert all(pattern_index(p) == i for i, p in enumerate(first))

# --- Guess.matches: previous guess + mask against a later word ---
@pytest.mark.parametrize("prev,mask,word,allowed", [
    ("abcde", "CCCCC", "abcde", True),
    ("abcdf", "CCCCC", "abcde", False),
    ("abcde", "WWWWW", "fghij", True),
    ("abcde", "MMMMM", "eabcd", True),
    ("baaaa", "WCMWW", "aaccc", True),
    ("baaaa", "WCMWW", "caacc", False),
    ("aaabb", "CMWWW", "accaa", False),
    ("tares", "WMMWW", "brink", False),
])
def test_guess_matches(prev, mask, word, allowed):
    assert Guess(prev, mask).matches(word) is allowed

@pytest.mark.parametrize("secret", ["right", "crane", "level", "aabbb"])
@pytest.mark.parametrize("word", ["tares", "wrong", "eerie", "abbey"])
def test_truthful_feedback_is_self_consistent(secret, word):
    g = Guess(word, compute(secret, word))
    assert is_consistent([g], secret)

def test_is_consistent_accepts_plain_tuples():
    history = [("raise", compute("crane", "raise")), ("stare", compute("crane", "stare"))]
    assert is_consistent(history, "crane")
    assert not is_consistent(history, "stare")

def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [Guess("raise", compute("crane", "raise"))]
    cand = filter_candidates(words, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand
    assert cand == [w for w in words if w in cand]

@pytest.mark.parametrize("text,expected", [
    ("CMWWC", "CMWWC"), ("cmwwc", "CMWWC"), (" wWmMc ", "WWMMC"),
])
def test_parse_mask(text, expected):
    assert parse_mask(text) == expected

@pytest.mark.parametrize("text", ["CMWW", "CMWWCC", "CMXWC", "GYG--", ""])
def test_parse_mask_rejects_bad_input(text):
    with pytest.raises(MaskParseError):
        parse_mask(text)

def test_validate_guess():
    allowed = {"crane", "raise", "stare"}
    assert validate_guess("crane", allowed) is True
    assert validate_guess("CRANE", allowed) is False
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("slate", allowed) is False
    assert validate_guess(12345, allowed) is False
