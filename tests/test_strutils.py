import pytest

from voidshell.strutils import (
    atoi,
    atoll,
    is_numeric,
    is_valid_identifier,
    split_words,
    trim,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n+7", 7),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_roundtrips_str():
    for value in (0, 1, -1, 123456, -987654):
        assert atoi(str(value)) == value


def test_atoll_limits_roundtrip():
    assert atoll(str(2**63 - 1)) == 2**63 - 1
    assert atoll(str(-(2**63))) == -(2**63)


@pytest.mark.parametrize("text", [str(2**63), str(-(2**63) - 1), "99999999999999999999999"])
def test_atoll_overflow_raises(text):
    with pytest.raises(OverflowError):
        atoll(text)


def test_atoll_stops_at_non_digit():
    assert atoll("  -15xyz") == -15
    assert atoll("") == 0


@pytest.mark.parametrize("text", ["0", "42", "-42", "+7", " 12 "])
def test_is_numeric_true(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["", "-", "abc", "12a", "1 2", "++1"])
def test_is_numeric_false(text):
    assert is_numeric(text) is False


def test_split_words_on_separator_and_whitespace():
    assert split_words("a:b  c::d\te", ":") == ["a", "b", "c", "d", "e"]


def test_split_words_matches_str_split_for_whitespace():
    text = "  one two\t\tthree\nfour \f five\v"
    assert split_words(text, " ") == text.split()


def test_split_words_empty():
    assert split_words("", ":") == []
    assert split_words(":::", ":") == []


def test_trim_both_ends():
    assert trim("xxhelloxx", "x") == "hello"
    assert trim("  a b  ", " ") == "a b"


def test_trim_everything_or_nothing():
    assert trim("aaaa", "a") == ""
    assert trim("abc", "") == "abc"
    assert trim("", "x") == ""


@pytest.mark.parametrize("key", ["PATH", "_", "_a1", "home_DIR2"])
def test_valid_identifiers(key):
    assert is_valid_identifier(key) is True


@pytest.mark.parametrize("key", ["", "1abc", "a-b", "a=b", "é", "a b"])
def test_invalid_identifiers(key):
    assert is_valid_identifier(key) is False