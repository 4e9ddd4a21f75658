import pytest

from clasp.strings import (
    count_char,
    count_char_n,
    find_name_value_separator,
    rfind_char_n,
    rfind_not_char_n,
    tokenize,
    tokenize_with_blanks,
)


@pytest.mark.parametrize("s", ["name=value", "name:value", "--opt=a:b", "-x:1=2"])
def test_separator_is_first_of_equals_or_colon(s):
    index = find_name_value_separator(s)
    assert s[index] in "=:"
    assert "=" not in s[:index] and ":" not in s[:index]


def test_separator_absent():
    assert find_name_value_separator("--flag") is None


def test_count_char_matches_occurrences():
    s = "a,b,,c"
    assert count_char(s, ",") == s.count(",")
    assert count_char("", ",") == 0


def test_count_char_rejects_bad_character():
    with pytest.raises(ValueError):
        count_char("abc", "")
    with pytest.raises(ValueError):
        count_char("abc", "\0")


def test_count_char_n_limits_and_nul():
    s = "x-x-x-x"
    assert count_char_n(s, len(s), "x") == count_char(s, "x")
    assert count_char_n(s, 0, "x") == 0
    assert count_char_n("xx\0xx", 10, "x") == count_char("xx", "x")


def test_count_char_n_rejects_negative_length():
    with pytest.raises(ValueError):
        count_char_n("abc", -1, "a")


def test_rfind_char_n_within_section():
    s = "abcabc"
    n = 4
    index = rfind_char_n(s, n, "c")
    assert index < n
    assert s[index] == "c"
    assert "c" not in s[index + 1 : n]


def test_rfind_char_n_not_found():
    assert rfind_char_n("abcabc", 2, "c") is None
    assert rfind_char_n("", 0, "c") is None


def test_rfind_not_char_n():
    s = "value   "
    index = rfind_not_char_n(s, len(s), " ")
    assert s[: index + 1] == s.rstrip(" ")
    assert rfind_not_char_n("    ", 4, " ") is None


def test_tokenize_with_blanks_keeps_empty_tokens():
    assert list(tokenize_with_blanks("a||b", "|")) == ["a", "", "b"]
    assert list(tokenize_with_blanks("true|false|", "|")) == ["true", "false", ""]
    assert list(tokenize_with_blanks("", "|")) == [""]


def test_tokenize_with_blanks_round_trip():
    s = "one,two;;three,"
    tokens = list(tokenize_with_blanks(s, ","))
    assert ",".join(tokens) == s


def test_tokenize_skips_empty_tokens():
    assert list(tokenize("||a||b|", "|")) == ["a", "b"]
    assert list(tokenize("a b,c", " ,")) == ["a", "b", "c"]
    assert list(tokenize("|||", "|")) == []