import string
from collections import namedtuple
from functools import partial

MAX_WORD_LEN = 255
BUFFER_SIZE = 4096
LEADING_PUNCTUATION = "([{'\""

# undecodable bytes survive as lone surrogates, one per byte
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

# C-locale character classes; nothing outside ASCII counts as a letter
WHITESPACE = frozenset(" \t\n\v\f\r")
LETTERS = frozenset(string.ascii_letters)
ALNUM = frozenset(string.ascii_letters + string.digits)

_FOLD_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

Token = namedtuple("Token", ["raw", "line", "column"])


#Convert ASCII letters to lowercase
def fold(word):
    """Lowercase A-Z only, leaving every other character unchanged"""
    return word.translate(_FOLD_TABLE)


def is_letter(ch):
    return ch in LETTERS


def is_upper(ch):
    return "A" <= ch <= "Z"


def is_lower(ch):
    return "a" <= ch <= "z"


def has_alpha(word):
    """True if the word contains at least one ASCII letter"""
    return any(ch in LETTERS for ch in word)


def strip_leading_punctuation(word):
    """Remove opening brackets and quotes from the front of a word"""
    return word.lstrip(LEADING_PUNCTUATION)


def strip_trailing_punctuation(word):
    """Remove trailing characters until the word ends with a letter or digit"""
    end = len(word)
    while end > 0 and word[end - 1] not in ALNUM:
        end -= 1
    return word[:end]


def clean_token(raw):
    """
    Turn a raw whitespace-delimited token into the word that gets looked up.

    Args:
        raw (str): Token exactly as it appeared in the input.

    Returns:
        str or None: The cleaned word, or None when the token should be
        skipped (empty, or no letters before or after cleaning).
    """
    if not raw or not has_alpha(raw):
        return None

    word = strip_trailing_punctuation(strip_leading_punctuation(raw))

    if not word or not has_alpha(word):
        return None
    return word


def byte_width(ch):
    """Number of bytes the character occupied in the original input"""
    if ch < "\x80":
        return 1
    return len(ch.encode(ENCODING, ENCODING_ERRORS))


#Separating tokens from a text stream
def split_tokens(stream, buffer_size=BUFFER_SIZE):
    """
    Yield every Token in a text stream together with its 1-based position.

    Positions count bytes of the encoded input, so a stream should be
    decoded with ENCODING_ERRORS to keep them exact. Only a newline starts
    a new line; every other byte, whitespace included, advances the column
    by one. Tokens longer than MAX_WORD_LEN bytes are truncated, but the
    dropped bytes still count towards the column.
    """
    line = column = token_column = 1
    chars = []
    size = 0
    for chunk in iter(partial(stream.read, buffer_size), ""):
        for ch in chunk:
            if ch in WHITESPACE:
                if chars:
                    yield Token("".join(chars), line, token_column)
                    chars = []
                    size = 0
                if ch == "\n":
                    line += 1
                    column = 1
                else:
                    column += 1
            else:
                width = byte_width(ch)
                if not chars:
                    token_column = column
                if size + width <= MAX_WORD_LEN:
                    chars.append(ch)
                # a character that does not fit ends the kept part
                size = MAX_WORD_LEN if size + width > MAX_WORD_LEN else size + width
                column += width

    if chars:
        yield Token("".join(chars), line, token_column)


def truncate_word(word):
    """Cut a word so that it encodes to at most MAX_WORD_LEN bytes"""
    size = 0
    for i, ch in enumerate(word):
        size += byte_width(ch)
        if size > MAX_WORD_LEN:
            return word[:i]
    return word
