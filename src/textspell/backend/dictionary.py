# dictionary.py

import logging
from bisect import bisect_left
from collections import namedtuple

from textspell.backend.matcher import word_in_dictionary
from textspell.utils.dict_loader import load_builtin_words, read_records
from textspell.utils.text_utils import fold, truncate_word

logger = logging.getLogger(__name__)

DictionaryEntry = namedtuple("DictionaryEntry", ["original", "folded_key"])


class Dictionary:
    """
    Read-only word list sorted by folded key.

    Entries sharing a folded key sit next to each other in load order, so a
    lookup can find the first one with a binary search and walk the rest.
    """

    def __init__(self, entries):
        self._entries = sorted(entries, key=lambda entry: entry.folded_key)
        self._keys = [entry.folded_key for entry in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, word):
        return self.lookup(word)

    def __repr__(self):
        return f"<Dictionary entries={len(self._entries)}>"

    def matching_entries(self, key):
        """Return every entry whose folded key equals ``key``, in load order."""
        start = bisect_left(self._keys, key)
        end = start
        while end < len(self._keys) and self._keys[end] == key:
            end += 1
        return self._entries[start:end]

    def lookup(self, word):
        return word_in_dictionary(self, word)


def build_dictionary(records):
    """
    Build a Dictionary from word-list records.

    Args:
        records (iterable of str): One word per record. A trailing line
            terminator is trimmed and empty records are skipped.

    Returns:
        Dictionary: Entries sorted by folded key, duplicates kept.
    """
    entries = []
    for record in records:
        word = truncate_word(record.rstrip("\r\n"))
        if word:
            entries.append(DictionaryEntry(word, fold(word)))
    return Dictionary(entries)


def load_dictionary(file_path, builtin=None):
    """
    Load a word-list file, optionally merged with a builtin list, into a Dictionary.

    Args:
        file_path (str): Path to the dictionary text file.
        builtin (str): pyspellchecker language code whose words are added
            after the file's records, or None.

    Returns:
        Dictionary: The sorted, read-only dictionary.

    Raises:
        DictionaryUnreadable: The file or the builtin list could not be read.
    """
    records = read_records(file_path)
    logger.debug("Read %d records from %s", len(records), file_path)

    if builtin:
        words = load_builtin_words(builtin)
        logger.debug("Added %d builtin '%s' words", len(words), builtin)
        records.extend(words)

    dictionary = build_dictionary(records)
    logger.info("Dictionary loaded: %d words", len(dictionary))
    return dictionary
