"""Elementary row operations.

Each in-place operation (trailing underscore) mutates ``A`` and returns
copies of the affected rows, never references into ``A``. Indices are
validated and the new row is built in full before anything is written,
so a failing call leaves ``A`` unchanged.

The copying variants take the same arguments, leave ``A`` alone and
return a new matrix.
"""
from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from linalgtools.utils.matrix import Matrix, check_row_index, copy_matrix


def row_swap_(A: Matrix, i: int, j: int) -> Tuple[List[Any], List[Any]]:
    """
    Swap rows i and j of A in place.

    Returns copies of the two rows in their new order, i.e. the contents
    now at positions i and j.

    >>> A = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    >>> row_swap_(A, 0, 2)
    ([9, 10, 11, 12], [1, 2, 3, 4])
    >>> A
    [[9, 10, 11, 12], [5, 6, 7, 8], [1, 2, 3, 4]]
    """
    check_row_index(A, i)
    check_row_index(A, j)
    A[i], A[j] = A[j], A[i]
    return list(A[i]), list(A[j])


def row_mul_(A: Matrix, i: int, factor: Any) -> List[Any]:
    """
    Multiply row i of A by factor in place. Returns a copy of the new row.

    A zero factor is applied like any other and yields a zero row.
    """
    check_row_index(A, i)
    new_row = [x * factor for x in A[i]]
    A[i][:] = new_row
    return list(new_row)


def row_add_(A: Matrix, i: int, factor: Any, target: int) -> List[Any]:
    """
    Add factor * row i to row target, in place. Only row target changes.

    Returns a copy of the new row target.

    >>> A = [[1, 2], [3, 4]]
    >>> row_add_(A, 0, -3, 1)
    [0, -2]
    """
    check_row_index(A, i)
    check_row_index(A, target)
    new_row = [t + factor * s for t, s in zip(A[target], A[i])]
    A[target][:] = new_row
    return list(new_row)


def row_swap(A: Sequence[Sequence[Any]], i: int, j: int) -> Matrix:
    """Copy of A with rows i and j swapped."""
    B = copy_matrix(A)
    row_swap_(B, i, j)
    return B


def row_mul(A: Sequence[Sequence[Any]], i: int, factor: Any) -> Matrix:
    """Copy of A with row i multiplied by factor."""
    B = copy_matrix(A)
    row_mul_(B, i, factor)
    return B


def row_add(A: Sequence[Sequence[Any]], i: int, factor: Any, target: int) -> Matrix:
    """Copy of A with factor * row i added to row target."""
    B = copy_matrix(A)
    row_add_(B, i, factor, target)
    return B
