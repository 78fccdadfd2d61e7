from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Tuple

from wordle_solver.engine import FrequencyTable
from wordle_solver.engine.validation import is_word

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DICTIONARY_PATH = DATA_DIR / "dictionary_5.txt"
ANSWERS_PATH = DATA_DIR / "answers_5.txt"


class DictionaryFormatError(ValueError):
    """A dictionary line is not `<5-letter-word> <non-negative count>`."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def parse_record(line: str) -> Tuple[str, int]:
    """
    Split one dictionary line into (word, count).

    Raises DictionaryFormatError (without location; the caller adds it).
    """
    word, sep, count = line.partition(" ")
    if not sep:
        raise DictionaryFormatError("expected '<word> <count>'")
    if not is_word(word):
        raise DictionaryFormatError(f"not a 5-letter lowercase word: {word!r}")
    if not (count.isascii() and count.isdigit()):
        raise DictionaryFormatError(f"count is not a non-negative integer: {count!r}")
    return word, int(count)


def load_frequency_table(p: Path | str = DICTIONARY_PATH) -> FrequencyTable:
    """
    Load a `<word> <count>` dictionary into a FrequencyTable.

    Trailing blank lines are ignored; any other malformed line, or a
    duplicated word, is fatal.
    """
    lines = read_lines(p)
    while lines and not lines[-1].strip():
        lines.pop()

    entries: List[Tuple[str, int]] = []
    seen = set()
    for lineno, line in enumerate(lines, start=1):
        try:
            word, count = parse_record(line)
        except DictionaryFormatError as e:
            raise DictionaryFormatError(f"{p}:{lineno}: {e}") from None
        if word in seen:
            raise DictionaryFormatError(f"{p}:{lineno}: duplicate word {word!r}")
        seen.add(word)
        entries.append((word, count))
    return FrequencyTable(entries)


def load_answers(p: Path | str = ANSWERS_PATH) -> List[str]:
    """Newline- or whitespace-separated answer words, blanks dropped."""
    return [w for ln in read_lines(p) for w in ln.split()]
