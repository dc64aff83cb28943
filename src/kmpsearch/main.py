# src/kmpsearch/main.py

"""
KMP search runner:
    python -m kmpsearch.main --pattern <p> (--text <t> | --text-file <file> | --pcap <file>)

Steps:
1. Load the text (literal, file, or TCP payloads of a capture).
2. Normalize (latin1, optional lower-casing).
3. Run the KMP search.
4. Print the report (or JSON).
5. Optionally export the pattern's failure automaton.
"""

import argparse
import json
import logging
from pathlib import Path

from kmpsearch.logging_config import setup_logging
from kmpsearch.normalizer import normalize_symbols
from kmpsearch.pcap_reader import scan_pcap
from kmpsearch.report import format_results, timed_search
from kmpsearch.visualization.dfa_exporter import export_kmp_to_dot
from kmpsearch.visualization.graphviz_renderer import render_dot

logger = logging.getLogger(__name__)


def _export_automaton(pattern, dot_path=None, svg_path=None):
    if not dot_path and not svg_path:
        return
    dot_source = export_kmp_to_dot(pattern)
    if dot_path:
        Path(dot_path).write_text(dot_source, encoding="utf-8")
        logger.info("wrote automaton DOT to %s", dot_path)
    if svg_path:
        Path(svg_path).write_text(render_dot(dot_source), encoding="utf-8")
        logger.info("wrote automaton SVG to %s", svg_path)


def run_search(pattern: str, text: str = None, text_file: str = None, pcap: str = None,
               nocase: bool = False, as_json: bool = False,
               dot_path: str = None, svg_path: str = None):
    """
    Run one search and print the result.
    Returns the match offsets (text input) or the list of packet hits (pcap input).
    """
    if pcap:
        hits = scan_pcap(pcap, pattern, nocase=nocase)
        if as_json:
            print(json.dumps(hits, indent=2))
        elif not hits:
            print("[-] No matches")
        else:
            for h in hits:
                print(f"[MATCH] packet {h['packet']} | {h['src']}:{h['sport']} -> "
                      f"{h['dst']}:{h['dport']} | offsets={h['offsets']}")
        _export_automaton(normalize_symbols(pattern, to_lower=nocase), dot_path, svg_path)
        return hits

    if text_file:
        raw = Path(text_file).read_bytes()
        source = text_file
    else:
        raw = text if text is not None else ""
        source = "text"

    haystack = normalize_symbols(raw, to_lower=nocase)
    needle = normalize_symbols(pattern, to_lower=nocase)
    logger.debug("searching %d symbol(s) from %s for %d symbol pattern", len(haystack), source, len(needle))

    matches, elapsed_us = timed_search(haystack, needle)

    if as_json:
        print(json.dumps({
            "source": source,
            "pattern": pattern,
            "matches": matches,
            "elapsed_us": elapsed_us
        }, indent=2))
    else:
        # show what was typed, offsets line up since folding keeps length
        print(format_results(source, normalize_symbols(raw), pattern, matches, elapsed_us))

    _export_automaton(needle, dot_path, svg_path)
    return matches


def main(argv=None):
    parser = argparse.ArgumentParser(description="Knuth-Morris-Pratt exact search")
    parser.add_argument("--pattern", required=True, help="Pattern to search for")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Literal text to search")
    source.add_argument("--text-file", help="Search the contents of this file")
    source.add_argument("--pcap", help="Search TCP payloads of this pcap file")
    parser.add_argument("--nocase", action="store_true", help="Case-insensitive (ASCII/latin1) search")
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("--dot", help="Write the pattern's KMP automaton as DOT to this path")
    parser.add_argument("--svg", help="Render the pattern's KMP automaton to SVG at this path")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    run_search(args.pattern, text=args.text, text_file=args.text_file, pcap=args.pcap,
               nocase=args.nocase, as_json=args.json, dot_path=args.dot, svg_path=args.svg)


if __name__ == "__main__":
    main()
