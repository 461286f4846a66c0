"""Tests for token cleaning and the input scanner."""
import io

from textspell.utils.text_utils import (
    MAX_WORD_LEN,
    Token,
    clean_token,
    fold,
    has_alpha,
    split_tokens,
    strip_leading_punctuation,
    strip_trailing_punctuation,
    truncate_word,
)


def test_fold_is_ascii_only_and_idempotent():
    for word in ["Hello", "McDonald", "CO-OP", "Élan", "x1Y2", ""]:
        assert fold(fold(word)) == fold(word)
    assert fold("McDonald") == "mcdonald"
    assert fold("CO-OP") == "co-op"
    # non-ASCII letters are left alone
    assert fold("ÉLAN") == "Élan"


def test_has_alpha():
    assert has_alpha("abc")
    assert has_alpha("4th")
    assert not has_alpha("1234")
    assert not has_alpha("--!?")
    assert not has_alpha("é")


def test_strip_leading_punctuation():
    assert strip_leading_punctuation("(hello") == "hello"
    assert strip_leading_punctuation("([{'\"word") == "word"
    assert strip_leading_punctuation("<tag") == "<tag"
    assert strip_leading_punctuation("don't") == "don't"


def test_strip_trailing_punctuation():
    assert strip_trailing_punctuation("hello),") == "hello"
    assert strip_trailing_punctuation("end.") == "end"
    assert strip_trailing_punctuation("item2") == "item2"
    assert strip_trailing_punctuation("...") == ""


def test_clean_token():
    assert clean_token("(hello),") == "hello"
    assert clean_token("'twas") == "twas"
    assert clean_token("co-op.") == "co-op"
    assert clean_token("don't") == "don't"
    assert clean_token("\"Quoted!\"") == "Quoted"


def test_clean_token_skips():
    assert clean_token("") is None
    assert clean_token("123") is None
    assert clean_token("--") is None
    assert clean_token("$5.00") is None
    # letters only inside the stripped parts
    assert clean_token("(12)a") == "12)a"
    assert clean_token("'(") is None


def test_split_tokens_positions():
    text = "Hello  world\n\tsecond line\n"
    assert list(split_tokens(io.StringIO(text))) == [
        Token("Hello", 1, 1),
        Token("world", 1, 8),
        Token("second", 2, 2),
        Token("line", 2, 9),
    ]


def test_split_tokens_carriage_return_counts_as_column():
    tokens = list(split_tokens(io.StringIO("ab\tcd\r\nef")))
    assert tokens == [Token("ab", 1, 1), Token("cd", 1, 4), Token("ef", 2, 1)]


def test_split_tokens_across_chunk_boundaries():
    tokens = list(split_tokens(io.StringIO("hello world"), buffer_size=3))
    assert tokens == [Token("hello", 1, 1), Token("world", 1, 7)]


def test_split_tokens_truncates_long_tokens():
    text = "a" * (MAX_WORD_LEN + 45) + " b"
    first, second = split_tokens(io.StringIO(text))
    assert first.raw == "a" * MAX_WORD_LEN
    assert first.column == 1
    assert second == Token("b", 1, MAX_WORD_LEN + 47)


def test_split_tokens_empty_input():
    assert list(split_tokens(io.StringIO(""))) == []
    assert list(split_tokens(io.StringIO(" \n\n "))) == []


def test_split_tokens_columns_count_utf8_bytes():
    tokens = list(split_tokens(io.StringIO("é qq\nnaïve x\n")))
    assert tokens == [
        Token("é", 1, 1),
        Token("qq", 1, 4),
        Token("naïve", 2, 1),
        Token("x", 2, 8),
    ]


def test_split_tokens_undecodable_bytes_are_one_column_each():
    text = b"na\xeeve ok".decode("utf-8", "surrogateescape")
    assert list(split_tokens(io.StringIO(text))) == [
        Token("na\udceeve", 1, 1),
        Token("ok", 1, 7),
    ]


def test_split_tokens_truncates_multibyte_tokens_by_bytes():
    text = "é" * 200 + " b"
    first, second = split_tokens(io.StringIO(text))
    assert first.raw == "é" * 127
    assert second == Token("b", 1, 402)


def test_truncate_word():
    assert truncate_word("a" * 300) == "a" * MAX_WORD_LEN
    assert truncate_word("é" * 200) == "é" * 127
    assert truncate_word("short") == "short"
