from __future__ import annotations

import math
import re

"""Cell-level predicates.

Pure functions deciding whether a raw (string) cell satisfies its column
rule. Input is stripped before checking.
"""

__all__ = [
    "parse_number",
    "is_nonempty_string",
    "is_positive_number",
]

# ASCII base-10 decimal, optional sign and exponent. No thousands separators,
# no currency symbols, no "inf"/"nan", no non-ASCII digits.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(value: str) -> float | None:
    """Parse a decimal number, returning None when the text is not one."""
    text = value.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):  # 1e999 -> inf
        return None
    return number


def is_nonempty_string(value: str) -> bool:
    return value.strip() != ""


def is_positive_number(value: str) -> bool:
    number = parse_number(value)
    return number is not None and number > 0
