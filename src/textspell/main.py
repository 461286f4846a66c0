# src/textspell/main.py
"""
Command-line entry point.

Usage:
    textspell [-s SUFFIX] [-b LANG] [-v] DICTIONARY [PATH ...]

With no PATH the text is read from standard input. Directories are searched
recursively for files ending in SUFFIX (default ".txt").
"""
import argparse
import io
import logging
import os
import sys

from textspell.backend.dictionary import load_dictionary
from textspell.backend.spell_checker import (
    DEFAULT_SUFFIX,
    check_directory,
    check_file,
    check_stream,
)
from textspell.errors import DictionaryUnreadable, InputUnreadable
from textspell.utils.text_utils import ENCODING, ENCODING_ERRORS

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def setup_logging(verbosity=0):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="textspell",
        description="Spell checker: report words missing from a word list",
    )
    parser.add_argument("-s", "--suffix", default=DEFAULT_SUFFIX,
                        help="file suffix to check inside directories (default: %(default)s)")
    parser.add_argument("-b", "--builtin", metavar="LANG",
                        help="also accept words from pyspellchecker's LANG word list (e.g. en)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log progress to stderr (repeat for debug output)")
    parser.add_argument("dictionary", help="path to the word list, one word per line")
    parser.add_argument("paths", nargs="*", help="files or directories to check (default: stdin)")
    return parser


def _read_stdin(dictionary, out):
    """Check standard input; returns True if anything was reported or it was unreadable."""
    stdin = sys.stdin
    if stdin is None or stdin.closed:
        logger.error("%s", InputUnreadable("<stdin>", "standard input is closed"))
        return True
    if isinstance(stdin, io.TextIOWrapper):
        # "\r" must reach the scanner untranslated
        stdin.reconfigure(encoding=ENCODING, errors=ENCODING_ERRORS, newline="")
    try:
        return check_stream(dictionary, stdin, out=out) > 0
    except OSError as e:
        logger.error("%s", InputUnreadable("<stdin>", e.strerror or str(e)))
        return True


def run(args, out=None):
    """Check every input named in ``args``; returns the process exit status."""
    if out is None:
        out = sys.stdout
        if isinstance(out, io.TextIOWrapper):
            # reports echo undecodable input bytes unchanged
            out.reconfigure(errors=ENCODING_ERRORS)

    try:
        dictionary = load_dictionary(args.dictionary, builtin=args.builtin)
    except DictionaryUnreadable as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    if not args.paths:
        return EXIT_FAILURE if _read_stdin(dictionary, out) else EXIT_SUCCESS

    error_found = False
    show_filename = len(args.paths) > 1
    for path in args.paths:
        if os.path.isdir(path):
            if check_directory(dictionary, path, args.suffix, out):
                error_found = True
        elif os.path.exists(path):
            try:
                if check_file(dictionary, path, show_filename, out):
                    error_found = True
            except InputUnreadable as e:
                logger.error("%s", e)
                error_found = True
        else:
            logger.error("Cannot access '%s'", path)
            error_found = True

    return EXIT_FAILURE if error_found else EXIT_SUCCESS


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
