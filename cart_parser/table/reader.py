from __future__ import annotations

import re
from pathlib import Path

"""Cart file reader.

Turns cart file text into a RawTable: a list of rows, each a list of trimmed
string cells. Row 0 is the header, rows 1.. are data rows.

Rules:
- Lines are separated by newlines (\\n or \\r\\n)
- Empty or whitespace-only lines are dropped before splitting
- Cells are separated by "," (no quoting / escaping support)
- Every cell is stripped of surrounding whitespace
"""

__all__ = [
    "CartFileError",
    "RawTable",
    "DELIMITER",
    "read_cart_file",
    "split_lines",
    "split_cells",
    "split_table",
]

DELIMITER = ","

# Only \n separates lines; other Unicode line breaks stay inside cells.
_LINE_BREAK_RE = re.compile(r"\r?\n")

RawTable = list[list[str]]


class CartFileError(Exception):
    """Raised when the cart file cannot be found or read."""


def read_cart_file(path: Path | str, encoding: str = "utf-8") -> str:
    """Read the whole cart file as text.

    Raises:
        CartFileError: file missing, not a regular file, unreadable or not
            decodable with the given encoding
    """
    p = Path(path)
    if not p.exists():
        raise CartFileError(f"cart file not found: {p}")
    if not p.is_file():
        raise CartFileError(f"path is not a file: {p}")
    try:
        with p.open("r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CartFileError(f"error reading cart file {p}: {e}") from e


def split_lines(text: str) -> list[str]:
    """Split text on \\n (optionally preceded by \\r) into non-blank lines."""
    return [line for line in _LINE_BREAK_RE.split(text) if line.strip()]


def split_cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split(DELIMITER)]


def split_table(text: str) -> RawTable:
    return [split_cells(line) for line in split_lines(text)]
