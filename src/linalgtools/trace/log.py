"""Step reporting for the elimination routines.

A sink is any callable ``sink(matrix, label)``. The elimination code calls
it at fixed points when ``show_steps`` is on and never reads anything
back from it.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Sequence, TextIO, Tuple

from linalgtools.utils.matrix import copy_matrix

Sink = Callable[[Sequence[Sequence[Any]], str], None]


def format_matrix(A: Sequence[Sequence[Any]]) -> str:
    """Render A one row per line with right-aligned columns."""
    if not A:
        return "[]"
    cells = [[str(x) for x in row] for row in A]
    n_cols = len(cells[0])
    if n_cols == 0:
        return "\n".join("[]" for _ in cells)
    widths = [max(len(row[j]) for row in cells) for j in range(n_cols)]
    return "\n".join(
        " ".join(s.rjust(w) for s, w in zip(row, widths)) for row in cells
    )


def print_matrix(
    A: Sequence[Sequence[Any]],
    label: str,
    file: Optional[TextIO] = None,
) -> None:
    """Print label, an underline, the matrix and a blank line."""
    out = file if file is not None else sys.stdout
    print(label, file=out)
    print("-" * len(label), file=out)
    print(format_matrix(A), file=out)
    print(file=out)


@dataclass(frozen=True)
class TraceStep:
    label: str
    matrix: Tuple[Tuple[Any, ...], ...]


class EliminationTrace:
    """
    Sink that records labelled snapshots instead of printing them.

    Snapshots are taken at call time, so later mutation of the matrix
    does not change recorded steps.
    """

    def __init__(self) -> None:
        self.steps: List[TraceStep] = []

    def __call__(self, A: Sequence[Sequence[Any]], label: str) -> None:
        snapshot = tuple(tuple(row) for row in A)
        self.steps.append(TraceStep(label=label, matrix=snapshot))

    def __iter__(self) -> Iterator[TraceStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, k: int) -> TraceStep:
        return self.steps[k]

    @property
    def labels(self) -> List[str]:
        return [s.label for s in self.steps]

    def matrices(self) -> List[List[List[Any]]]:
        """Recorded snapshots as fresh list-of-rows matrices."""
        return [copy_matrix(s.matrix) for s in self.steps]
