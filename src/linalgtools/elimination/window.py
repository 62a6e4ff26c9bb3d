"""Row windows and the single-column pivot pass."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from linalgtools.rowops.elementary import row_add_, row_swap_
from linalgtools.utils.matrix import Matrix, is_zero


@dataclass(frozen=True)
class RowWindow:
    """
    Rows [start, len(matrix)) of matrix, all columns.

    Indices passed to a window are relative to ``start``; every read and
    write goes straight to the backing matrix.
    """

    matrix: Matrix
    start: int = 0

    @property
    def n_rows(self) -> int:
        return max(len(self.matrix) - self.start, 0)

    @property
    def n_cols(self) -> int:
        return len(self.matrix[0]) if self.matrix else 0

    def get(self, i: int, j: int) -> Any:
        return self.matrix[self.start + i][j]

    def swap(self, i: int, j: int) -> None:
        row_swap_(self.matrix, self.start + i, self.start + j)

    def add(self, i: int, factor: Any, target: int) -> None:
        row_add_(self.matrix, self.start + i, factor, self.start + target)


def first_nonzero_column(w: RowWindow) -> Optional[int]:
    """Leftmost column of the window with a nonzero entry, or None."""
    for col in range(w.n_cols):
        for row in range(w.n_rows):
            if not is_zero(w.get(row, col)):
                return col
    return None


def ref_pass(w: RowWindow) -> Optional[int]:
    """One elimination pass on a window.

    Picks the leftmost nonzero column, moves its first nonzero entry to
    the window's top row, and clears every entry beneath it.

    Returns
    -------
    int or None
        The pivot column, or None if the window is entirely zero (in
        which case nothing is modified).
    """
    col = first_nonzero_column(w)
    if col is None:
        return None

    if is_zero(w.get(0, col)):
        row = next(r for r in range(1, w.n_rows) if not is_zero(w.get(r, col)))
        w.swap(0, row)

    pivot = w.get(0, col)
    for row in range(1, w.n_rows):
        entry = w.get(row, col)
        if not is_zero(entry):
            w.add(0, -(entry / pivot), row)

    return col
