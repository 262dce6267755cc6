import pytest

from miniprintf.strings import (
    atoi,
    itoa,
    split,
    strchr,
    striteri,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    s = "hello"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strchr_accepts_int_code():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_returns_end():
    assert strchr("hello", 0) == len("hello")
    assert strchr("hello", "\0") == len("hello")


def test_strchr_int_uses_low_byte():
    assert strchr("abc", 256 + ord("b")) == strchr("abc", "b")


def test_strrchr_finds_last_occurrence():
    s = "hello"
    index = strrchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "z") is None
    assert strrchr("hello", 0) == len("hello")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strncmp_negative_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_length():
    big = "Foo Bar Baz"
    index = strnstr(big, "Bar", len(big))
    assert big[index:index + 3] == "Bar"


def test_strnstr_match_must_fit_in_length():
    big = "Foo Bar Baz"
    index = big.find("Bar")
    assert strnstr(big, "Bar", index + 2) is None
    assert strnstr(big, "Bar", index + 3) == index


def test_strnstr_empty_little():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "xyz", 3) is None


def test_atoi_basic():
    assert atoi("42") == 42
    assert atoi("  -42abc") == -42
    assert atoi("\t\n+17") == 17


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_atoi_round_trip_with_itoa():
    for n in (0, 7, -7, 2147483647, -2147483648):
        assert atoi(itoa(n)) == n


def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"
    assert substr("hello", 1, 100) == "ello"


def test_substr_start_past_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 50, 3) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strtrim():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("  hi  ", "") == "  hi  "


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_join_invariant():
    words = split("a,b,,c", ",")
    assert ",".join(words) == "a,b,c"


def test_itoa_limits():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"
    assert itoa(-12) == "-12"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_strmapi():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"
    assert strmapi("aaa", lambda i, ch: str(i)) == "012"


def test_strmapi_nul_result_truncates():
    assert strmapi("abc", lambda i, ch: "\0" if i == 1 else ch) == "a"


def test_striteri_list():
    buf = list("abc")
    seen = []

    def visit(i, ch):
        seen.append(i)
        return ch.upper()

    striteri(buf, visit)
    assert buf == list("ABC")
    assert seen == [0, 1, 2]


def test_striteri_bytearray_stops_at_nul():
    buf = bytearray(b"ab\0cd")
    striteri(buf, lambda i, b: b + 1)
    assert buf == bytearray(b"bc\0cd")


def test_striteri_none_leaves_item():
    buf = list("xyz")
    striteri(buf, lambda i, ch: None)
    assert buf == list("xyz")