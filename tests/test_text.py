import pytest

from cubscene.text import (
    count_words,
    split,
    strdup,
    strjoin,
    striteri,
    strmapi,
    strndup,
    strtrim,
    substr,
)


def test_strdup_copies_whole_text():
    assert strdup("bonjour") == "bonjour"


def test_strdup_stops_at_terminator():
    assert strdup("abc\0def") == "abc"


def test_strdup_empty():
    assert strdup("") == ""


@pytest.mark.parametrize("count", [0, 1, 3, 7, 100])
def test_strndup_is_prefix_with_bounded_length(count):
    text = "bonjour"
    result = strndup(text, count)
    assert text.startswith(result)
    assert len(result) == min(count, len(text))


def test_strndup_negative_count():
    with pytest.raises(ValueError):
        strndup("abc", -1)


def test_substr_whole_when_length_exceeds():
    assert substr("bonjour", 0, 10) == "bonjour"


def test_substr_middle():
    assert substr("bonjour", 3, 2) == "jo"


@pytest.mark.parametrize("start", [7, 8, 50])
def test_substr_start_past_end_is_empty(start):
    assert substr("bonjour", start, 3) == ""


def test_substr_result_is_slice_of_input():
    text = "abcdefghij"
    for start in range(len(text)):
        for length in range(len(text) + 2):
            part = substr(text, start, length)
            assert text[start:].startswith(part)
            assert len(part) == min(length, len(text) - start)


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -2)])
def test_substr_negative_arguments(start, length):
    with pytest.raises(ValueError):
        substr("abc", start, length)


def test_strjoin():
    assert strjoin("hello ", "world") == "hello world"


def test_strjoin_with_empty():
    assert strjoin("", "world") == "world"
    assert strjoin("hello", "") == "hello"


def test_strjoin_respects_terminators():
    assert strjoin("ab\0x", "cd\0y") == "abcd"


def test_strtrim_source_example():
    assert strtrim("abcHelloabc", "abc") == "Hello"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  x  ", "") == "  x  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_result_has_no_charset_at_ends():
    result = strtrim("\t  cub map \n ", " \t\n")
    assert result
    assert result[0] not in " \t\n"
    assert result[-1] not in " \t\n"


def test_split_drops_empty_fields():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_accepts_integer_code():
    assert split("220,100,0", ord(",")) == ["220", "100", "0"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert count_words(",,,", ",") == 0


def test_split_empty_text():
    assert split("", " ") == []


def test_split_nul_separator_gives_whole_text():
    assert split("abc", "\0") == ["abc"]


@pytest.mark.parametrize(
    "text,sep",
    [("a,b,,c,", ","), ("   ", " "), ("no separators", "#"), (",x,,y,z,,", ",")],
)
def test_count_words_matches_split_and_fields_are_clean(text, sep):
    parts = split(text, sep)
    assert count_words(text, sep) == len(parts)
    for part in parts:
        assert part
        assert sep not in part
    assert "".join(parts) == text.replace(sep, "")


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a,,b", ",,")


def test_strmapi_upper():
    assert strmapi("HELLO WORLD", lambda i, c: c.lower()) == "hello world"


def test_strmapi_passes_indices_in_order():
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch

    assert strmapi("abcd", record) == "abcd"
    assert seen == [0, 1, 2, 3]


def test_strmapi_nul_ends_result():
    assert strmapi("abcd", lambda i, c: "\0" if i == 2 else c) == "ab"


def test_striteri_modifies_in_place():
    chars = list("cat meow")
    striteri(chars, lambda i, c: c.upper())
    assert "".join(chars) == "CAT MEOW"


def test_striteri_none_keeps_element():
    chars = list("abc")
    striteri(chars, lambda i, c: None)
    assert chars == ["a", "b", "c"]


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    visited = []

    def record(index, ch):
        visited.append(index)
        return "z"

    striteri(chars, record)
    assert visited == [0, 1]
    assert chars == ["z", "z", "\0", "c", "d"]


def test_striteri_bytearray():
    data = bytearray(b"abc")
    striteri(data, lambda i, c: c - 32)
    assert data == bytearray(b"ABC")


def test_striteri_rejects_immutable_text():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, c: c)