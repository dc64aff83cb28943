# src/kmpsearch/visualization/dfa_exporter.py

from typing import Any, Dict, List, Sequence

from kmpsearch.matcher.failure import build_lps


def _symbols(pattern: Sequence) -> Sequence:
    # bytes index to ints, show them as latin1 chars
    if isinstance(pattern, (bytes, bytearray)):
        return bytes(pattern).decode("latin1")
    return pattern


def _symbol_label(sym) -> str:
    """Printable DOT label for one pattern symbol."""
    if not isinstance(sym, str):
        sym = str(sym)
    if len(sym) == 1 and (not sym.isprintable() or sym == '"' or sym == '\\'):
        return f"0x{ord(sym):02X}"
    return sym.replace('\\', '\\\\').replace('"', '\\"')


def export_kmp_to_dot(pattern: Sequence, include_fail_links: bool = True) -> str:
    """
    Exports the KMP automaton of pattern to GraphViz DOT format.

    States are 0..m (number of pattern symbols matched so far), state m accepts.

    Args:
        pattern: The pattern whose automaton is drawn.
        include_fail_links: Whether to draw dashed failure edges.

    Returns:
        A string containing the DOT graph definition.
    """
    if pattern is None or len(pattern) == 0:
        return 'digraph "KMP" { label="Error: Empty pattern"; }'

    m = len(pattern)
    lps = build_lps(pattern)
    symbols = _symbols(pattern)

    lines = [
        'digraph "KMP" {',
        '  rankdir=LR;',
        '  node [shape=circle, fontname="Arial", fontsize=10];',
        '  edge [fontname="Arial", fontsize=9];',
        '  start [shape=point];',
    ]

    for state in range(m + 1):
        attrs = []
        if state == 0:
            attrs.append('style=filled')
            attrs.append('fillcolor="#e6ffe6"')
        elif state == m:
            attrs.append('shape=doublecircle')
            attrs.append('color=red')
            attrs.append('style=filled')
            attrs.append('fillcolor="#ffe6e6"')
        attrs.append(f'label="{state}"')
        lines.append(f'  {state} [{", ".join(attrs)}];')

    lines.append('  start -> 0;')

    for state in range(m):
        lines.append(f'  {state} -> {state + 1} [label="{_symbol_label(symbols[state])}"];')

    if include_fail_links:
        for state in range(1, m + 1):
            target = lps[state - 1]
            # links back to 0 are noise
            if target != 0:
                lines.append(f'  {state} -> {target} [color="grey", style="dashed", constraint=false];')

    lines.append('}')
    return "\n".join(lines)


def export_kmp_to_json(pattern: Sequence) -> Dict[str, Any]:
    """
    Export the automaton as JSON-friendly nodes/edges lists plus the LPS table.
    """
    if pattern is None or len(pattern) == 0:
        return {"error": "Empty pattern"}

    m = len(pattern)
    lps = build_lps(pattern)
    symbols = _symbols(pattern)

    nodes: List[Dict[str, Any]] = []
    edges: List[Dict[str, Any]] = []

    for state in range(m + 1):
        nodes.append({
            "id": state,
            "accepting": state == m,
            "fail": lps[state - 1] if state > 0 else None
        })

    for state in range(m):
        edges.append({
            "source": state,
            "target": state + 1,
            "label": symbols[state]
        })

    return {
        "pattern": list(symbols),
        "lps": lps,
        "nodes": nodes,
        "edges": edges
    }
