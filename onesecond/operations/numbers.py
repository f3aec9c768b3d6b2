from __future__ import annotations

import re

"""Integer parsing operations.

``parse_int`` signals malformed input with ValueError (exception style);
``try_parse_int`` returns None instead and never raises (result style).
Both accept the same language: optional sign, ASCII digits, no whitespace.
"""

__all__ = [
    "parse_int",
    "try_parse_int",
    "good_number",
    "bad_number",
]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    value = int(text)
    # int() is more lenient (whitespace, "1_000", non-ASCII digits)
    if "_" in text or not text.isascii() or text != text.strip():
        raise ValueError(f"invalid literal for integer: {text!r}")
    return value


def try_parse_int(text: str) -> int | None:
    if _INT_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


def good_number(i: int) -> str:
    return str(i)


def bad_number(i: int) -> str:
    return "x" + str(i)
