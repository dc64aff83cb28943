# src/cli/run_demo.py

"""
Demonstration of the KMP matcher on short, medium and long inputs:

python src/cli/run_demo.py
"""

from kmpsearch.report import complexity_summary, format_results, timed_search

DNA_BASE = "ACGTACGTTAGCTAGCTAGCTAGCTGACGTACGTACGTACGT"


def demo_cases():
    """(title, text, pattern) triples run by the demo."""
    return [
        ("Short String Test", "ABABDABACDABABCABAB", "ABABCABAB"),
        ("Medium String Test", "The quick brown fox jumps over the lazy dog. " * 50, "fox jumps"),
        ("Long String Test (DNA Sequence)", DNA_BASE * 500, "TAGCTAGCT"),
        ("No Match Test", "AAAAAAAAAA", "AAAB"),
    ]


def main():
    print("KNUTH-MORRIS-PRATT (KMP) STRING MATCHING ALGORITHM")
    print("Implementation and Testing")

    results = {}
    for title, text, pattern in demo_cases():
        matches, elapsed_us = timed_search(text, pattern)
        results[title] = matches
        print(format_results(title, text, pattern, matches, elapsed_us))

    print(complexity_summary())
    return results


if __name__ == "__main__":
    main()
