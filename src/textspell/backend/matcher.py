# matcher.py

from textspell.utils.text_utils import fold, is_letter, is_lower, is_upper


def _is_mixed_case(word):
    return any(is_lower(ch) for ch in word) and any(is_upper(ch) for ch in word)


def _is_all_upper(word):
    return all(is_upper(ch) for ch in word if is_letter(ch))


def is_valid_capitalization(dict_word, input_word):
    """
    Decide whether ``input_word`` is an acceptable casing of ``dict_word``.

    A lowercase dictionary letter accepts either case, an uppercase one
    requires uppercase, and non-letters must match exactly. An all-caps
    input never matches a mixed-case dictionary word ("MCDONALD" is not
    "McDonald").
    """
    if len(dict_word) != len(input_word):
        return False

    if _is_mixed_case(dict_word) and _is_all_upper(input_word):
        return False

    for d, inp in zip(dict_word, input_word):
        if not is_letter(d):
            if d != inp:
                return False
            continue
        if fold(d) != fold(inp):
            return False
        if is_upper(d) and not is_upper(inp):
            return False
    return True


def word_in_dictionary(dictionary, word):
    """Return True if any entry with the word's folded key accepts its casing."""
    for entry in dictionary.matching_entries(fold(word)):
        if is_valid_capitalization(entry.original, word):
            return True
    return False
