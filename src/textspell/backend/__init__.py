# src/textspell/backend/__init__.py

from .dictionary import Dictionary, DictionaryEntry, build_dictionary, load_dictionary
from .matcher import is_valid_capitalization, word_in_dictionary
from .spell_checker import (
    Misspelling,
    check_directory,
    check_file,
    check_stream,
    check_word,
    find_misspellings,
    format_report,
)

__all__ = [
    "Dictionary",
    "DictionaryEntry",
    "build_dictionary",
    "load_dictionary",
    "is_valid_capitalization",
    "word_in_dictionary",
    "Misspelling",
    "check_directory",
    "check_file",
    "check_stream",
    "check_word",
    "find_misspellings",
    "format_report",
]
