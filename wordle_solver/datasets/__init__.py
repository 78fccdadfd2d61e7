from .validator import validate_dictionary, pretty_summary
from .io import (
    ANSWERS_PATH, DICTIONARY_PATH, DictionaryFormatError,
    load_answers, load_frequency_table, read_lines, write_lines,
)

__all__ = [
    "validate_dictionary", "pretty_summary", "DictionaryFormatError",
    "load_frequency_table", "load_answers", "read_lines", "write_lines",
    "DICTIONARY_PATH", "ANSWERS_PATH",
]
