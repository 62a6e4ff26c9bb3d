"""Plain list-of-rows matrices: shape checks, copies and element tests."""
from __future__ import annotations

from fractions import Fraction
from typing import Any, List, Sequence, Tuple

Matrix = List[List[Any]]
Pivot = Tuple[int, int]


def shape(A: Sequence[Sequence[Any]]) -> Tuple[int, int]:
    """(rows, cols) of a rectangular matrix. The 0-row matrix has 0 columns."""
    n_rows = len(A)
    n_cols = len(A[0]) if n_rows else 0
    return n_rows, n_cols


def check_matrix(A: Sequence[Sequence[Any]]) -> Tuple[int, int]:
    """Validate that every row has the same length and return the shape."""
    n_rows, n_cols = shape(A)
    for i, row in enumerate(A):
        if len(row) != n_cols:
            raise ValueError(
                f"Matrix is not rectangular: row 0 has {n_cols} entries, "
                f"row {i} has {len(row)}."
            )
    return n_rows, n_cols


def check_row_index(A: Sequence[Sequence[Any]], i: int) -> None:
    if not 0 <= i < len(A):
        raise IndexError(f"Row index {i} out of range for a matrix with {len(A)} rows.")


def copy_matrix(A: Sequence[Sequence[Any]]) -> Matrix:
    """Independent copy: fresh outer list and fresh row lists."""
    return [list(row) for row in A]


def to_fractions(A: Sequence[Sequence[Any]]) -> Matrix:
    """Copy of A with every entry converted to Fraction."""
    return [[Fraction(x) for x in row] for row in A]


def is_zero(x: Any) -> bool:
    """Additive-identity test.

    Symbolic values may carry their own ``is_zero``; it is trusted only
    when it gives a definite answer.
    """
    z = getattr(x, "is_zero", None)
    if isinstance(z, bool):
        return z
    return x == 0


def is_one(x: Any) -> bool:
    return is_zero(x - 1)
