from __future__ import annotations

from typing import Any, List, Optional, Sequence

from linalgtools.utils.matrix import check_matrix, is_one, is_zero


def leading_columns(A: Sequence[Sequence[Any]]) -> List[Optional[int]]:
    """Column of the first nonzero entry of each row (None for zero rows)."""
    check_matrix(A)
    lead: List[Optional[int]] = []
    for row in A:
        lead.append(next((j for j, x in enumerate(row) if not is_zero(x)), None))
    return lead


def is_row_echelon(A: Sequence[Sequence[Any]]) -> bool:
    """Zero rows at the bottom, leading entries strictly moving right."""
    prev = -1
    seen_zero_row = False
    for col in leading_columns(A):
        if col is None:
            seen_zero_row = True
            continue
        if seen_zero_row or col <= prev:
            return False
        prev = col
    return True


def is_reduced_row_echelon(A: Sequence[Sequence[Any]]) -> bool:
    """Row echelon, every pivot is 1, and pivot columns are otherwise zero."""
    if not is_row_echelon(A):
        return False
    for r, col in enumerate(leading_columns(A)):
        if col is None:
            break
        if not is_one(A[r][col]):
            return False
        if any(not is_zero(A[i][col]) for i in range(len(A)) if i != r):
            return False
    return True
