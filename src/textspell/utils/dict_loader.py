import re

from spellchecker import SpellChecker

from textspell.errors import DictionaryUnreadable
from textspell.utils.text_utils import ENCODING, ENCODING_ERRORS

_RECORD_SEPARATOR = re.compile(r"[\r\n]")


def read_records(file_path):
    """
    Reads a word-list file and returns its records in file order.

    Args:
        file_path (str): Path to the dictionary text file.

    Returns:
        list: Non-empty records, split on "\\n" and "\\r". Case and inner
        whitespace are left untouched.

    Raises:
        DictionaryUnreadable: The file could not be opened or read.
    """
    try:
        #newline="" keeps "\r" so that CRLF and bare CR both end a record
        with open(file_path, "r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as file:
            text = file.read()
    except OSError as e:
        raise DictionaryUnreadable(file_path, e.strerror or str(e)) from e

    return [record for record in _RECORD_SEPARATOR.split(text) if record]


def load_builtin_words(language="en"):
    """Return the word list that ships with pyspellchecker for ``language``."""
    try:
        spell = SpellChecker(language=language)
    except ValueError as e:
        raise DictionaryUnreadable(f"<builtin:{language}>", str(e)) from e
    return list(spell.word_frequency.keys())

