from __future__ import annotations

import re
from fractions import Fraction
from typing import List

from linalgtools.utils.matrix import Matrix, check_matrix

_ROW_SEP = re.compile(r"[;\n]")
_ENTRY_SEP = re.compile(r"[\s,]+")


def strip_brackets(text: str) -> str:
    """
    Remove one enclosing pair of square brackets and surrounding whitespace.
    """
    s = text.strip()
    if s.startswith("[") and s.endswith("]"):
        s = s[1:-1].strip()
    return s


def parse_matrix(text: str) -> Matrix:
    """
    Parse a matrix literal into exact Fraction entries.

    Rows are separated by ';' or newlines, entries by whitespace or commas.
    Entries are anything Fraction accepts: "3", "-3/2", "0.25".

      "[2 3/2; 3 2]"  ->  [[2, 3/2], [3, 2]]

    Blank rows are skipped; an empty literal gives the 0x0 matrix.
    """
    rows: List[List[Fraction]] = []
    for line in _ROW_SEP.split(strip_brackets(text)):
        tokens = [t for t in _ENTRY_SEP.split(line.strip()) if t]
        if not tokens:
            continue
        try:
            rows.append([Fraction(t) for t in tokens])
        except ValueError as exc:
            raise ValueError(f"Could not parse matrix row {line.strip()!r}: {exc}") from exc
    check_matrix(rows)
    return rows
