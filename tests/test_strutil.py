import pytest

from minishell.strutil import split, strtok, strtrim


def test_split_drops_empty_words():
    assert split("  a b  c ", " ") == ["a", "b", "c"]


def test_split_empty_text():
    assert split("", ",") == []


def test_split_only_separators():
    assert split(",,,", ",") == []


@pytest.mark.parametrize("text", ["a,b,c", ",x,,y,", "single", "a,,,,b"])
def test_split_words_hold_no_separator_and_rejoin(text):
    words = split(text, ",")
    assert all(word and "," not in word for word in words)
    assert "".join(words) == text.replace(",", "")


def test_split_empty_separator_keeps_text():
    assert split("abc", "") == ["abc"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",;")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a ", "") == "  a "


def test_strtrim_all_trimmed():
    assert strtrim(" \t \t", " \t") == ""


def test_strtok_multiple_delimiters():
    assert list(strtok("a,,b;c", ",;")) == ["a", "b", "c"]


def test_strtok_leading_and_trailing_delimiters():
    assert list(strtok(";;word;;", ";")) == ["word"]


def test_strtok_only_delimiters():
    assert list(strtok(" \t ", " \t")) == []


@pytest.mark.parametrize("text", ["a b c", "  lead", "trail  ", "x  y"])
def test_strtok_matches_split_on_single_delimiter(text):
    assert list(strtok(text, " ")) == split(text, " ")