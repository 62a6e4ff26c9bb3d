"""Row echelon and reduced row echelon forms by Gaussian elimination.

Pivots are chosen as the first nonzero entry, with no magnitude-based
pivoting, so results are exact only for exact element types (Fraction,
symbolic values). Float input works but inherits rounding.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from linalgtools.elimination.window import RowWindow, ref_pass
from linalgtools.rowops.elementary import row_add_, row_mul_
from linalgtools.trace.log import Sink, print_matrix
from linalgtools.utils.matrix import Matrix, Pivot, check_matrix, copy_matrix, is_one, is_zero


def _resolve_sink(show_steps: bool, sink: Optional[Sink]) -> Optional[Sink]:
    if not show_steps:
        return None
    return sink if sink is not None else print_matrix


def ref_(A: Matrix, show_steps: bool = False, sink: Optional[Sink] = None) -> List[Pivot]:
    """
    Put A in row echelon form, in place.

    Returns the (row, col) positions of the pivots, both strictly
    increasing. With show_steps, ``sink(A, label)`` is called once before
    the first pass and once after each pivot (default sink prints).

    >>> from fractions import Fraction as F
    >>> A = [[F(2), F(1)], [F(4), F(3)]]
    >>> ref_(A)
    [(0, 0), (1, 1)]
    >>> A[1]
    [Fraction(0, 1), Fraction(1, 1)]
    """
    n_rows, _ = check_matrix(A)
    report = _resolve_sink(show_steps, sink)
    if report is not None:
        report(A, "Start")

    pivots: List[Pivot] = []
    for start_row in range(n_rows):
        col = ref_pass(RowWindow(A, start_row))
        # Remaining rows are all zero
        if col is None:
            break
        pivots.append((start_row, col))
        if report is not None:
            report(A, f"Pivot {pivots[-1]}")
    return pivots


def rref_(A: Matrix, show_steps: bool = False, sink: Optional[Sink] = None) -> List[Pivot]:
    """
    Put A in reduced row echelon form, in place.

    Runs ref_ first, then walks the pivots from last to first: each pivot
    row is scaled so the pivot is exactly 1 and the entries above it are
    cleared. Returns the same pivots as ref_.
    """
    pivots = ref_(A, show_steps=show_steps, sink=sink)
    report = _resolve_sink(show_steps, sink)

    for row, col in reversed(pivots):
        pivot = A[row][col]
        if not is_one(pivot):
            row_mul_(A, row, 1 / pivot)
            if report is not None:
                report(A, f"Reduce {(row, col)}: {pivot} -> 1")

        for i in range(row):
            entry = A[i][col]
            if not is_zero(entry):
                row_add_(A, row, -entry, i)
        if report is not None:
            report(A, f"Clear above {(row, col)}")
    return pivots


def ref(A: Sequence[Sequence[Any]], show_steps: bool = False, sink: Optional[Sink] = None) -> Matrix:
    """Row echelon form of a copy of A. A itself is not modified."""
    B = copy_matrix(A)
    ref_(B, show_steps=show_steps, sink=sink)
    return B


def rref(A: Sequence[Sequence[Any]], show_steps: bool = False, sink: Optional[Sink] = None) -> Matrix:
    """Reduced row echelon form of a copy of A. A itself is not modified."""
    B = copy_matrix(A)
    rref_(B, show_steps=show_steps, sink=sink)
    return B


def row_reduce(
    A: Sequence[Sequence[Any]],
    show_steps: bool = False,
    sink: Optional[Sink] = None,
) -> Tuple[Matrix, List[Pivot]]:
    """Reduced row echelon form of a copy of A, together with its pivots."""
    B = copy_matrix(A)
    pivots = rref_(B, show_steps=show_steps, sink=sink)
    return B, pivots


def exact_rank(A: Sequence[Sequence[Any]]) -> int:
    """Rank of A as the number of row echelon pivots. Exact for Fraction input."""
    return len(ref_(copy_matrix(A)))
