# tests/test_kmp.py
import pytest
from hypothesis import given, strategies as st

from kmpsearch.matcher.kmp import iter_matches, search


def brute_force(text, pattern):
    m = len(pattern)
    return [p for p in range(len(text) - m + 1) if text[p:p + m] == pattern]


@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        ("ABABDABACDABABCABAB", "ABABCABAB", [10]),
        ("AAAA", "AA", [0, 1, 2]),
        ("AAA", "AA", [0, 1]),
        ("AAAAAAAAAA", "AAAB", []),
        ("ababcababa", "aba", [0, 5, 7]),
        ("abcdef", "gh", []),
        ("pattern", "pattern", [0]),
        ("xxabc", "abc", [2]),
    ]
)
def test_search_literal_cases(text, pattern, expected):
    assert search(text, pattern) == expected


def test_empty_pattern_matches_nowhere():
    assert search("some text", "") == []
    assert search("", "") == []


def test_empty_text():
    assert search("", "a") == []


def test_pattern_longer_than_text():
    assert search("abc", "abcd") == []


def test_none_is_treated_as_empty():
    assert search(None, "a") == []
    assert search("abc", None) == []
    assert search(None, None) == []


def test_bytes_alphabet():
    assert search(b"\x00\x01\x00\x01\x00", b"\x00\x01\x00") == [0, 2]


def test_token_sequences():
    tokens = ["GET", "/", "HTTP", "GET", "/"]
    assert search(tokens, ["GET", "/"]) == [0, 3]
    assert search((1, 2, 1, 2, 1), (1, 2, 1)) == [0, 2]


def test_mixed_alphabets_never_match():
    # b"a"[0] is 97, never equal to "a"
    assert search(b"aaa", "a") == []


def test_iter_matches_is_lazy():
    gen = iter_matches("abab" * 1000, "ab")
    assert next(gen) == 0
    assert next(gen) == 2


def test_text_index_never_decreases():
    steps = []
    text = "AABAACAADAABAABA" * 4
    matches = list(iter_matches(text, "AABA", on_step=lambda i, j: steps.append((i, j))))

    assert matches == brute_force(text, "AABA")
    positions = [i for i, _ in steps]
    assert positions == sorted(positions)
    # i advances or j falls back on every step
    assert len(steps) <= 2 * len(text)


def test_no_steps_for_degenerate_input():
    steps = []
    list(iter_matches("ab", "abc", on_step=lambda i, j: steps.append(i)))
    assert steps == []


@given(st.text(alphabet="ab", max_size=40), st.text(alphabet="ab", min_size=1, max_size=6))
def test_matches_brute_force_small_alphabet(text, pattern):
    assert search(text, pattern) == brute_force(text, pattern)


@given(st.lists(st.integers(0, 2), max_size=40), st.lists(st.integers(0, 2), min_size=1, max_size=6))
def test_matches_brute_force_int_tokens(text, pattern):
    assert search(text, pattern) == brute_force(text, pattern)


@given(st.text(alphabet="abc", min_size=1, max_size=20))
def test_self_match(s):
    assert search(s, s) == [0]


@given(st.text(alphabet="ab", max_size=30), st.text(alphabet="ab", min_size=1, max_size=6))
def test_output_strictly_increasing_and_valid(text, pattern):
    result = search(text, pattern)
    assert all(a < b for a, b in zip(result, result[1:]))
    for pos in result:
        assert text[pos:pos + len(pattern)] == pattern
