import pytest

from islandroutes.textutil import (
    count_substr,
    count_words,
    parse_int,
    replace_substr,
    split_words,
    squeeze_spaces,
    substr_index,
    trim,
)


@pytest.mark.parametrize(
    "text, sep",
    [
        ("a,,b,c", ","),
        ("  one two   three ", " "),
        ("---", "-"),
        ("island", "-"),
        ("", " "),
    ],
)
def test_split_words_drops_empty_pieces(text, sep):
    words = split_words(text, sep)
    assert all(words)
    assert all(sep not in word for word in words)
    assert "".join(words) == text.replace(sep, "")
    assert count_words(text, sep) == len(words)


def test_split_words_keeps_order():
    assert split_words("a,,b,c", ",") == ["a", "b", "c"]


def test_split_words_empty_text_has_no_words():
    assert count_words("", ",") == 0


@pytest.mark.parametrize("sep", ["", "ab"])
def test_separator_must_be_one_character(sep):
    with pytest.raises(ValueError):
        split_words("a b", sep)
    with pytest.raises(ValueError):
        count_words("a b", sep)


def test_trim_removes_surrounding_whitespace():
    assert trim("\t hello world \n\v") == "hello world"


@pytest.mark.parametrize("text", ["  x ", "\r\nabc\f", "plain", "   "])
def test_trim_is_idempotent(text):
    once = trim(text)
    assert trim(once) == once
    assert once in text


def test_trim_of_only_whitespace_is_empty():
    assert trim(" \t\n ") == ""


def test_squeeze_spaces_collapses_runs():
    assert squeeze_spaces("  a \t\n b   c ") == "a b c"


@pytest.mark.parametrize("text", ["one  two", "\tx\ny\rz ", "single", ""])
def test_squeeze_spaces_invariants(text):
    result = squeeze_spaces(text)
    assert "  " not in result
    assert result == trim(result)
    assert result.split(" ") == text.split() or result == ""


def test_count_substr_is_non_overlapping():
    assert count_substr("aaaa", "aa") == 2


@pytest.mark.parametrize(
    "text, sub",
    [("abcabcab", "ab"), ("mississippi", "ss"), ("xyz", "q"), ("aaaaa", "aa")],
)
def test_count_substr_matches_removal(text, sub):
    count = count_substr(text, sub)
    removed = replace_substr(text, sub, "")
    assert len(removed) == len(text) - count * len(sub)


def test_count_substr_rejects_empty():
    with pytest.raises(ValueError):
        count_substr("abc", "")


@pytest.mark.parametrize(
    "text, sub", [("hello world", "world"), ("abab", "ba"), ("xxxy", "xy")]
)
def test_substr_index_points_at_first_match(text, sub):
    index = substr_index(text, sub)
    assert text[index : index + len(sub)] == sub
    assert sub not in text[: index + len(sub) - 1]


def test_substr_index_missing():
    assert substr_index("hello", "z") == -1


def test_replace_substr_round_trip():
    text = "Greenland-Bananal,8"
    swapped = replace_substr(text, "-", "#")
    assert "-" not in swapped
    assert replace_substr(swapped, "#", "-") == text


def test_replace_substr_rejects_empty():
    with pytest.raises(ValueError):
        replace_substr("abc", "", "x")


@pytest.mark.parametrize("number", [0, 1, 7, 42, 905, 123456])
def test_parse_int_round_trip(number):
    assert parse_int(str(number)) == number
    assert parse_int("+" + str(number)) == number
    assert parse_int("-" + str(number)) == -number
    assert parse_int(" " + str(number)) == number
    assert parse_int("\n" + str(number)) == number


def test_parse_int_ignores_trailing_text():
    assert parse_int("12abc") == parse_int("12")
    assert parse_int("4\nA-B,3\n") == parse_int("4")


@pytest.mark.parametrize("text", ["+-5", "-+5", "  5", "abc", "", "++5"])
def test_parse_int_without_leading_number_is_zero(text):
    assert parse_int(text) == 0