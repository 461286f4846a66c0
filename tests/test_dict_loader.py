"""Tests for reading word lists."""
import logging

import pytest

from textspell.errors import DictionaryUnreadable
from textspell.backend.dictionary import load_dictionary
from textspell.utils.dict_loader import load_builtin_words, read_records


def test_read_records_handles_crlf_and_blank_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"Paris\r\nfrance\n\nEiffel-Tower\rlast")
    assert read_records(str(path)) == ["Paris", "france", "Eiffel-Tower", "last"]


def test_read_records_keeps_inner_whitespace(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("New York\n  padded\n", encoding="utf-8")
    assert read_records(str(path)) == ["New York", "  padded"]


def test_read_records_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(DictionaryUnreadable) as exc_info:
        read_records(str(missing))
    assert exc_info.value.path == str(missing)
    assert "Cannot open dictionary file" in str(exc_info.value)


def test_load_dictionary(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("banana\nApple\n", encoding="utf-8")
    with caplog.at_level(logging.INFO):
        d = load_dictionary(str(path))
    assert [e.original for e in d] == ["Apple", "banana"]
    assert "Dictionary loaded: 2 words" in caplog.text


def test_load_builtin_words():
    words = load_builtin_words("en")
    assert "the" in words
    assert len(words) > 1000


def test_load_builtin_words_unknown_language():
    with pytest.raises(DictionaryUnreadable):
        load_builtin_words("xx-not-a-language")


def test_load_dictionary_with_builtin(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("McDonald\n", encoding="utf-8")
    d = load_dictionary(str(path), builtin="en")
    assert d.lookup("McDonald")
    assert d.lookup("The")
