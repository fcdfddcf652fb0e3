import pytest

from pushswap.strings import (
    atoi,
    itoa,
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_counts_characters():
    assert strlen("Hi!") == len("Hi!")


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")


def test_strchr_finds_first():
    text = "Hello, world"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_missing_returns_none():
    assert strchr("Hello, world", "a") is None


def test_strchr_nul_finds_terminator():
    text = "Hello, world"
    assert strchr(text, "\0") == len(text)


def test_strchr_accepts_code():
    text = "Hello, world"
    assert strchr(text, ord("w")) == text.index("w")


def test_strrchr_finds_last():
    text = "Hello, world"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]


def test_strrchr_missing_and_nul():
    text = "Hi, 42!"
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal():
    assert strncmp("Hello", "Hello", 5) == 0


def test_strncmp_orders():
    assert strncmp("Hello", "Hellp", 5) < 0
    assert strncmp("Hellp", "Hello", 5) > 0


def test_strncmp_prefix_longer_is_greater():
    assert strncmp("Hello", "Hell", 5) > 0


def test_strncmp_limited_length():
    assert strncmp("Hello", "Help", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_is_antisymmetric():
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_needle():
    haystack = "Hello, 42!"
    index = strnstr(haystack, "42", len(haystack))
    assert haystack[index:].startswith("42")


def test_strnstr_missing():
    assert strnstr("Hello, 42!", "z", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("Hello, 42!", "", 10) == 0


def test_strnstr_respects_length():
    haystack = "Hello, 42!"
    end = haystack.index("42") + 1
    assert strnstr(haystack, "42", end) is None
    assert strnstr(haystack, "42", end + 1) == haystack.index("42")


def test_strdup_copies():
    assert strdup("Hi, 42!") == "Hi, 42!"
    assert strdup("ab\0cd") == "ab"


def test_strlcpy_full_copy():
    dest = bytearray(20)
    src = b"Bom dia Portugal"
    assert strlcpy(dest, src, 17) == len(src)
    assert dest[: len(src)] == src
    assert dest[len(src)] == 0


def test_strlcpy_truncates():
    dest = bytearray(b"xxxxxxxx")
    src = b"Bom dia Portugal"
    assert strlcpy(dest, src, 4) == len(src)
    assert dest[:3] == src[:3]
    assert dest[3] == 0


def test_strlcpy_zero_size_leaves_dest():
    dest = bytearray(b"keep")
    assert strlcpy(dest, b"abc", 0) == len(b"abc")
    assert dest == bytearray(b"keep")


def test_strlcpy_small_dest_raises():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"abcdef", 10)


def test_strlcat_appends():
    dest = bytearray(20)
    dest[:7] = b"Bom dia"
    result = strlcat(dest, b" Portugal", 17)
    assert result == len(b"Bom dia") + len(b" Portugal")
    assert dest[:result] == b"Bom dia Portugal"
    assert dest[result] == 0


def test_strlcat_truncates():
    dest = bytearray(20)
    dest[:3] = b"abc"
    result = strlcat(dest, b"defgh", 6)
    assert result == len(b"abc") + len(b"defgh")
    assert dest[:5] == b"abcde"
    assert dest[5] == 0


def test_strlcat_size_not_beyond_dest():
    dest = bytearray(b"abcdef\0\0")
    before = bytes(dest)
    assert strlcat(dest, b"xyz", 3) == 3 + len(b"xyz")
    assert bytes(dest) == before


def test_strlcat_requires_terminator():
    with pytest.raises(ValueError):
        strlcat(bytearray(b"abc"), b"d", 10)


def test_atoi_source_example():
    assert atoi("    -12334abv") == -12334


@pytest.mark.parametrize("text, expected", [("  +42", 42), ("\t\n-7xyz", -7), ("0", 0)])
def test_atoi_parses(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["abc", "--5", "", "+"])
def test_atoi_without_digits(text):
    assert atoi(text) == 0


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -1, 2147483647, -2147483648, 120])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")