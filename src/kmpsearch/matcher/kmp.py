# src/kmpsearch/matcher/kmp.py
"""
Knuth-Morris-Pratt exact search.
API:
    search(text, pattern) -> List[int]
    iter_matches(text, pattern, on_step=None) -> yields start offsets
Notes:
- text and pattern are sequences over the same alphabet (str, bytes, lists of tokens...).
- Matches may overlap: search("AAA", "AA") == [0, 1].
- An empty pattern matches nowhere. None is treated like an empty sequence.
- Degenerate inputs never raise, they produce no matches.
"""

from typing import Callable, Generator, List, Optional, Sequence

from kmpsearch.matcher.failure import build_lps

StepCallback = Callable[[int, int], None]


def _is_empty(seq: Optional[Sequence]) -> bool:
    # len() instead of truthiness so array-like sequences work too
    return seq is None or len(seq) == 0


def iter_matches(text: Optional[Sequence], pattern: Optional[Sequence],
                 on_step: Optional[StepCallback] = None) -> Generator[int, None, None]:
    """
    Yield every start offset of pattern in text, in increasing order.

    on_step(i, j) is called once per scan iteration with the current text
    index i and pattern index j. The text index is never decremented.
    """
    if _is_empty(pattern):
        return
    if _is_empty(text) or len(text) < len(pattern):
        return

    n = len(text)
    m = len(pattern)

    # table belongs to this call only
    lps = build_lps(pattern)

    i = 0  # index in text
    j = 0  # index in pattern

    while i < n:
        if on_step is not None:
            on_step(i, j)

        if pattern[j] == text[i]:
            i += 1
            j += 1

        if j == m:
            yield i - j
            # keep the matched border so overlapping occurrences are found
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1


def search(text: Optional[Sequence], pattern: Optional[Sequence]) -> List[int]:
    """Return all start offsets of pattern in text (strictly increasing, overlaps included)."""
    return list(iter_matches(text, pattern))
