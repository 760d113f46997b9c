import pytest

from fillit.text_search import (
    strchr,
    strcmp,
    strcspn,
    strequ,
    strlen,
    strncmp,
    strnequ,
    strnstr,
    strrchr,
    strspn,
    strstr,
)


@pytest.mark.parametrize("s", ["", "a", "hello world", "tetromino"])
def test_strlen_matches_length(s):
    assert strlen(s) == len(s)


def test_strchr_finds_first_occurrence():
    s = "hello"
    idx = strchr(s, "l")
    assert s[idx] == "l"
    assert "l" not in s[:idx]


def test_strchr_accepts_int_code():
    s = "abc#def"
    assert strchr(s, ord("#")) == strchr(s, "#")
    assert s[strchr(s, ord("#"))] == "#"


def test_strchr_terminator_gives_length():
    s = "abcd"
    assert strchr(s, "\0") == len(s)
    assert strchr(s, 0) == len(s)


def test_strchr_missing_is_none():
    assert strchr("abc", "z") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strchr_rejects_wrong_type():
    with pytest.raises(TypeError):
        strchr("abc", 1.5)


def test_strrchr_finds_last_occurrence():
    s = "a.b.c"
    idx = strrchr(s, ".")
    assert s[idx] == "."
    assert "." not in s[idx + 1 :]
    assert idx > strchr(s, ".")


def test_strrchr_terminator_and_missing():
    assert strrchr("xyz", "\0") == 3 == len("xyz")
    assert strrchr("xyz", "q") is None


def test_strstr_empty_needle_is_zero():
    assert strstr("anything", "") == 0


def test_strstr_finds_first_match():
    haystack = "ababcabc"
    needle = "abc"
    idx = strstr(haystack, needle)
    assert haystack[idx : idx + len(needle)] == needle
    assert needle not in haystack[: idx + len(needle) - 1]


def test_strstr_missing_is_none():
    assert strstr("abcdef", "xyz") is None


def test_strnstr_respects_limit():
    haystack = "abcdef"
    needle = "def"
    assert strnstr(haystack, needle, len(haystack) - 1) is None
    idx = strnstr(haystack, needle, len(haystack))
    assert haystack[idx : idx + len(needle)] == needle
    assert idx + len(needle) <= len(haystack)


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strcmp_equal_and_ordering():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0


@pytest.mark.parametrize("a,b", [("abc", "abd"), ("ab", "abc"), ("", "x"), ("z", "a")])
def test_strcmp_antisymmetric(a, b):
    assert strcmp(a, b) == -strcmp(b, a)
    assert strcmp(a, b) != 0


def test_strcmp_prefix_difference_is_next_code():
    assert strcmp("abc", "ab") == ord("c")


def test_strncmp_limits_comparison():
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) == ord("x") - ord("y")
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strspn_invariant():
    s = "aabbcab"
    accept = "ab"
    k = strspn(s, accept)
    assert all(ch in accept for ch in s[:k])
    assert s[k] not in accept


def test_strspn_whole_string():
    assert strspn("abab", "ab") == len("abab")


def test_strcspn_invariant():
    s = "hello, world"
    reject = ",!"
    k = strcspn(s, reject)
    assert not any(ch in reject for ch in s[:k])
    assert s[k] in reject


def test_strcspn_no_reject_found():
    assert strcspn("abc", "xyz") == len("abc")


def test_strequ():
    assert strequ("abc", "abc") is True
    assert strequ("abc", "abd") is False
    assert strequ(None, "abc") is False
    assert strequ("abc", None) is False


def test_strnequ():
    assert strnequ("abcx", "abcy", 3) is True
    assert strnequ("abcx", "abcy", 4) is False
    assert strnequ("ab", "abc", 2) is True
    assert strnequ(None, None, 0) is False