# src/kmpsearch/report.py

"""
Human readable search reports:
- timed_search runs the matcher and measures it
- format_results renders one search (lengths, positions, matches in context, timing)
- complexity_summary is the fixed O(n+m) summary block printed by the demo
"""

import time
from typing import List, Sequence, Tuple

from kmpsearch.matcher.kmp import search

BANNER_WIDTH = 80
DEFAULT_PREVIEW = 100
DEFAULT_CONTEXT_WIDTH = 10


def _banner() -> str:
    return "=" * BANNER_WIDTH


def _show(seq: Sequence) -> str:
    if isinstance(seq, str):
        return seq
    if isinstance(seq, (bytes, bytearray)):
        return bytes(seq).decode("latin1")
    return " ".join(str(s) for s in seq)


def timed_search(text: Sequence, pattern: Sequence) -> Tuple[List[int], int]:
    """Run search and return (matches, elapsed microseconds)."""
    start = time.perf_counter_ns()
    matches = search(text, pattern)
    end = time.perf_counter_ns()
    return matches, (end - start) // 1000


def match_context(text: Sequence, pattern_len: int, pos: int,
                  width: int = DEFAULT_CONTEXT_WIDTH) -> Sequence:
    """Slice of text around a match, width symbols on each side."""
    start = max(0, pos - width)
    end = min(len(text), pos + pattern_len + width)
    return text[start:end]


def format_results(title: str, text: Sequence, pattern: Sequence, matches: List[int],
                   elapsed_us: int, *, preview: int = DEFAULT_PREVIEW,
                   show_context: int = 3) -> str:
    text_preview = text if len(text) <= preview else text[:preview]
    lines = [
        "",
        _banner(),
        f"TEST: {title}",
        _banner(),
        f"Text length: {len(text)} characters",
        f"Pattern length: {len(pattern)} characters",
        f"Text: {_show(text_preview)}" + ("..." if len(text) > preview else ""),
        f'Pattern: "{_show(pattern)}"',
        "",
        f"Matches found: {len(matches)}",
    ]

    if matches:
        lines.append(f"Positions: {matches}")
        count = min(show_context, len(matches))
        lines.append("")
        lines.append(f"First {count} match(es) in context:")
        for pos in matches[:count]:
            ctx = match_context(text, len(pattern), pos)
            lines.append(f"  [{pos}]: ...{_show(ctx)}...")
    else:
        lines.append("No matches found.")

    lines.append("")
    lines.append(f"Execution time: {elapsed_us} microseconds")
    lines.append(_banner())
    return "\n".join(lines)


def complexity_summary() -> str:
    return "\n".join([
        "",
        _banner(),
        "Complexity Analysis",
        _banner(),
        "Time Complexity:",
        "  - Preprocessing (LPS array): O(m)",
        "  - Searching: O(n)",
        "  - Overall: O(n + m)",
        "",
        "Space Complexity:",
        "  - LPS array: O(m)",
        "  - Overall: O(m)",
        "",
        "Where:",
        "  n = length of text",
        "  m = length of pattern",
        _banner(),
    ])
