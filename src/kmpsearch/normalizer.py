"""
normalizer.py
--------------
Turns raw input into the symbol sequence handed to the matcher.

Steps:
1. Convert bytes to str using latin1 (lossless, one symbol per byte)
2. Lowercase if requested (per character, length preserving)
"""

from typing import Union


def bytes_to_str_latin1(payload: bytes) -> str:
    """Safe lossless conversion from raw bytes to Python str."""
    return bytes(payload).decode("latin1")


def fold_case(s: str) -> str:
    """Lower-case s one character at a time, keeping characters whose lower form is longer."""
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in s)


def normalize_symbols(data: Union[str, bytes, bytearray], *, to_lower=False) -> str:
    """
    Normalize text or raw bytes to a str of symbols.
    Offsets are preserved: symbol k of the result is byte/char k of the input.
    """
    if isinstance(data, (bytes, bytearray)):
        s = bytes_to_str_latin1(data)
    else:
        s = data
    if to_lower:
        s = fold_case(s)
    return s
