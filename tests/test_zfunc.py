import pytest

from cpkit.zfunc import shortest_repeating_unit, z_function

SAMPLES = ["", "a", "aaaaa", "abacaba", "aabxaab", "abcabcabc", "abcd", "zzyzzyz"]


def test_empty():
    assert z_function("") == []


@pytest.mark.parametrize("s", SAMPLES)
def test_z_matches_definition(s):
    z = z_function(s)
    assert len(z) == len(s)
    if s:
        assert z[0] == 0
    n = len(s)
    for i in range(1, n):
        length = z[i]
        assert s[:length] == s[i : i + length]
        assert i + length == n or s[length] != s[i + length]


def test_all_same_characters():
    s = "aaaa"
    z = z_function(s)
    assert z[1:] == [len(s) - i for i in range(1, len(s))]


@pytest.mark.parametrize("s", SAMPLES)
def test_unit_rebuilds_string(s):
    unit = shortest_repeating_unit(s)
    assert len(unit) <= len(s) or s == ""
    if s:
        assert len(s) % len(unit) == 0
        assert unit * (len(s) // len(unit)) == s


def test_repeated_unit():
    assert shortest_repeating_unit("abc" * 3) == "abc"


def test_no_repetition_returns_string():
    assert shortest_repeating_unit("abcd") == "abcd"
    assert shortest_repeating_unit("abcab") == "abcab"


def test_unit_is_minimal():
    s = "ab" * 6
    unit = shortest_repeating_unit(s)
    assert shortest_repeating_unit(unit) == unit
    assert unit == shortest_repeating_unit("ab")