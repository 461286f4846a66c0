# src/textspell/utils/__init__.py
"""
Utilities package for token cleaning, input scanning and word-list loading.
"""

from .text_utils import fold, clean_token, split_tokens, Token
from .dict_loader import read_records, load_builtin_words

__all__ = [
    "fold",
    "clean_token",
    "split_tokens",
    "Token",
    "read_records",
    "load_builtin_words",
]
