# src/kmpsearch/matcher/failure.py
"""
KMP failure function (LPS table).
API:
    build_lps(pattern) -> List[int]
Notes:
- lps[i] is the length of the longest proper prefix of pattern[0..i]
  that is also a suffix of it. lps[0] is always 0.
- Works on any indexable sequence whose items compare with ==.
"""

from typing import List, Sequence


def build_lps(pattern: Sequence) -> List[int]:
    """Build the LPS table for pattern in O(m). An empty pattern gives an empty table."""
    m = len(pattern)
    lps = [0] * m

    # length of the previous longest prefix-suffix
    length = 0
    i = 1

    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            # fall back on the already computed structure, i stays put
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1

    return lps
