"""
Dataset validator for the frequency dictionary and the answers list.

What this module does:
- Check every dictionary line against the `<word> <count>` format.
- Detect invalid lines and duplicate words; compute SHA-256 of the raw files.
- Check that every answer is a dictionary word (the engine can only find
  secrets it knows about).
- Return a machine-readable dict (for manifests) and provide a pretty
  one-line summary.

Unlike load_frequency_table, nothing here raises on bad content: the point
is to report every problem at once.

Typical use:
    from wordle_solver.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("wordle_solver/data/dictionary_5.txt",
                              "wordle_solver/data/answers_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle_solver.engine.validation import is_word

from .io import DictionaryFormatError, parse_record


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # number of valid records
    sha256: str          # of the raw bytes; "" if missing
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    """Top-level validation result for the (dictionary, answers) pair."""
    dictionary: FileReport
    answers: FileReport
    total_weight: int
    answers_subset_dictionary: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan_dictionary(path: Path) -> Tuple[List[Tuple[str, int]], List[str]]:
    """Return (valid records, problems) for a dictionary file."""
    records: List[Tuple[str, int]] = []
    problems: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            try:
                records.append(parse_record(line))
            except DictionaryFormatError as e:
                problems.append(f"line {lineno}: {e}")
    return records, problems


def _scan_answers(path: Path) -> Tuple[List[str], int]:
    words: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            for w in raw.split():
                if is_word(w):
                    words.append(w)
                else:
                    invalid += 1
    return words, invalid


def _missing_report(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


def validate_dictionary(dictionary_path: str, answers_path: str) -> Dict:
    """
    Validate a frequency dictionary and its answers list.

    Returns a JSON-serializable dict (see ValidationReport) whose `passed`
    flag is strict: both files non-empty, no invalid lines, no duplicate
    dictionary words, and answers a subset of the dictionary.
    """
    issues: List[str] = []
    dict_p = Path(dictionary_path)
    ans_p = Path(answers_path)

    if not dict_p.exists() or not ans_p.exists():
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        rep = ValidationReport(
            dictionary=_missing_report(dictionary_path),
            answers=_missing_report(answers_path),
            total_weight=0,
            answers_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    records, problems = _scan_dictionary(dict_p)
    answers, ans_invalid = _scan_answers(ans_p)

    dict_words = {w for w, _ in records}
    answers_set = set(answers)

    dict_report = FileReport(
        path=str(dict_p), exists=True, count=len(records), sha256=_sha256_file(dict_p),
        unique_count=len(dict_words), invalid_lines=len(problems),
    )
    ans_report = FileReport(
        path=str(ans_p), exists=True, count=len(answers), sha256=_sha256_file(ans_p),
        unique_count=len(answers_set), invalid_lines=ans_invalid,
    )

    subset_ok = answers_set.issubset(dict_words)
    if not subset_ok:
        missing = sorted(answers_set - dict_words)[:5]
        issues.append(f"answers not subset of dictionary (e.g., {missing})")

    if dict_report.count == 0:
        issues.append("dictionary contains 0 valid records")
    if ans_report.count == 0:
        issues.append("answers file contains 0 valid words")

    # Surface the first few bad lines verbatim
    if problems:
        issues.append(f"dictionary has {len(problems)} invalid line(s): {problems[:3]}")
    if ans_invalid:
        issues.append(f"answers has {ans_invalid} invalid token(s)")

    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate words")

    passed = (
            subset_ok
            and not problems
            and ans_invalid == 0
            and dict_report.count > 0
            and ans_report.count > 0
            and dict_report.count == dict_report.unique_count
    )

    rep = ValidationReport(
        dictionary=dict_report,
        answers=ans_report,
        total_weight=sum(c for _, c in records),
        answers_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.

        dictionary=212 (uniq=212, sha=abc123...) | answers=60 (...) | answers⊆dictionary=True | OK
    """
    d = report["dictionary"]
    a = report["answers"]
    status = "OK" if report["passed"] else "FAIL"
    d_sha = (d.get("sha256") or "")[:12]
    a_sha = (a.get("sha256") or "")[:12]
    return (
        f"dictionary={d['count']} (uniq={d['unique_count']}, sha={d_sha}) "
        f"| answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| answers⊆dictionary={report['answers_subset_dictionary']} | {status}"
    )
