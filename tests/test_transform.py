import pytest

from sigtalk.transform import (
    apply_indexed,
    int_to_text,
    join,
    map_indexed,
    split,
    substring,
    trim,
)


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483648, -10, 100])
def test_int_to_text_round_trip(n):
    assert int(int_to_text(n)) == n


def test_int_to_text_extremes():
    assert int_to_text(-2147483648) == "-2147483648"
    assert int_to_text(0) == "0"


def test_int_to_text_out_of_range():
    with pytest.raises(OverflowError):
        int_to_text(2147483648)


def test_split_source_example():
    assert split("AiBiCiDiE", "i") == ["A", "B", "C", "D", "E"]


def test_split_no_separator_present():
    assert split("AiBiCiDiE", " ") == ["AiBiCiDiE"]


def test_split_drops_empty_pieces():
    words = split("  one   two three  ", " ")
    assert words == ["one", "two", "three"]
    assert all(word and " " not in word for word in words)


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_apply_indexed_replaces_in_place():
    chars = list("hello")
    apply_indexed(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert "".join(chars) == "HeLlO"


def test_apply_indexed_passes_indices():
    seen = []
    chars = list("abc")
    apply_indexed(chars, lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("abc"))
    assert chars == list("abc")


def test_join():
    assert join("ab", "cd") == "abcd"
    assert join("", "x") == "x"


def test_map_indexed_uppercase():
    text = "Hello world"
    assert map_indexed(text, lambda i, c: c.upper()) == text.upper()


def test_map_indexed_uses_index():
    assert map_indexed("abc", lambda i, c: str(i)) == "012"


def test_map_indexed_preserves_length():
    text = "message"
    assert len(map_indexed(text, lambda i, c: c)) == len(text)


def test_trim_both_ends():
    assert trim("xxhixx", "x") == "hi"
    assert trim("  a b  ", " ") == "a b"


def test_trim_everything_and_nothing():
    assert trim("xyxy", "xy") == ""
    assert trim("abc", "") == "abc"


def test_substring_within():
    text = "hello world"
    assert substring(text, 6, 5) == "world"


def test_substring_clipped_and_past_end():
    text = "hello"
    assert substring(text, 3, 100) == text[3:]
    assert substring(text, 5, 3) == ""
    assert substring(text, 50, 3) == ""


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)