# spell_checker.py

import logging
import os
import sys
from collections import namedtuple

from textspell.backend.matcher import word_in_dictionary
from textspell.errors import InputUnreadable
from textspell.utils.text_utils import ENCODING, ENCODING_ERRORS, clean_token, split_tokens

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".txt"

Misspelling = namedtuple("Misspelling", ["word", "line", "column"])


def check_word(dictionary, raw):
    """
    Clean a raw token and look it up.

    Returns:
        str or None: The cleaned word if it is misspelled, otherwise None
        (including tokens the cleaner skips).
    """
    word = clean_token(raw)
    if word is None or word_in_dictionary(dictionary, word):
        return None
    return word


def find_misspellings(dictionary, stream):
    """Yield a Misspelling for every token in ``stream`` that fails lookup, in order."""
    for token in split_tokens(stream):
        word = check_word(dictionary, token.raw)
        if word is not None:
            yield Misspelling(word, token.line, token.column)


def format_report(misspelling, label=None):
    """Format one report line: ``label:line:col word`` or ``line:col word``"""
    word, line, column = misspelling
    if label is not None:
        return f"{label}:{line}:{column} {word}"
    return f"{line}:{column} {word}"


def check_stream(dictionary, stream, label=None, out=None):
    """
    Write a report line for each misspelled token in ``stream``.

    Args:
        dictionary (Dictionary): Word list to check against.
        stream: Text stream to scan.
        label (str): Source name shown in front of each report, or None.
        out: Where reports go (defaults to stdout).

    Returns:
        int: Number of misspellings reported.
    """
    out = out if out is not None else sys.stdout
    count = 0
    for misspelling in find_misspellings(dictionary, stream):
        out.write(format_report(misspelling, label) + "\n")
        count += 1
    return count


def open_input(path):
    """Open an input file for scanning, raising InputUnreadable on failure"""
    try:
        return open(path, "r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="")
    except OSError as e:
        raise InputUnreadable(path, e.strerror or str(e)) from e


def check_file(dictionary, path, show_filename=False, out=None):
    """Check one file; returns the number of misspellings reported."""
    with open_input(path) as f:
        try:
            count = check_stream(dictionary, f, path if show_filename else None, out)
        except OSError as e:
            raise InputUnreadable(path, e.strerror or str(e)) from e
    logger.info("%s: %d misspelled", path, count)
    return count


def _sorted_entries(path):
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise InputUnreadable(path, e.strerror or str(e)) from e


def check_directory(dictionary, path, suffix=DEFAULT_SUFFIX, out=None):
    """
    Recursively check every regular file under ``path`` whose name ends in ``suffix``.

    Hidden entries (names starting with ".") are skipped and reports always
    carry the file name. Unreadable files or subdirectories are logged and
    skipped.

    Returns:
        bool: True if anything was misspelled or could not be read.
    """
    try:
        entries = _sorted_entries(path)
    except InputUnreadable as e:
        logger.error("%s", e)
        return True

    error_found = False
    for entry in entries:
        if entry.name.startswith("."):
            continue
        fullpath = os.path.join(path, entry.name)
        try:
            is_dir = entry.is_dir()
            is_file = entry.is_file()
        except OSError:
            continue

        if is_dir:
            if check_directory(dictionary, fullpath, suffix, out):
                error_found = True
        elif is_file and entry.name.endswith(suffix):
            try:
                if check_file(dictionary, fullpath, show_filename=True, out=out):
                    error_found = True
            except InputUnreadable as e:
                logger.error("%s", e)
                error_found = True
    return error_found
