"""
linalgtools: row echelon and reduced row echelon forms by Gaussian
elimination, with exact (Fraction or symbolic) arithmetic and an optional
step-by-step trace.
"""

from .rowops.elementary import (
    row_swap_,
    row_mul_,
    row_add_,
    row_swap,
    row_mul,
    row_add,
)
from .elimination.window import RowWindow, ref_pass
from .elimination.echelon import ref_, rref_, ref, rref, row_reduce, exact_rank
from .elimination.checks import is_row_echelon, is_reduced_row_echelon
from .trace.log import format_matrix, print_matrix, TraceStep, EliminationTrace
from .io.parse import parse_matrix
from .viz.draw import draw_trace

# Shared utilities
from .utils.matrix import shape, check_matrix, copy_matrix, to_fractions, is_zero

__all__ = [
    # Row operations
    "row_swap_",
    "row_mul_",
    "row_add_",
    "row_swap",
    "row_mul",
    "row_add",
    # Elimination
    "RowWindow",
    "ref_pass",
    "ref_",
    "rref_",
    "ref",
    "rref",
    "row_reduce",
    "exact_rank",
    "is_row_echelon",
    "is_reduced_row_echelon",
    # Trace
    "format_matrix",
    "print_matrix",
    "TraceStep",
    "EliminationTrace",
    # IO
    "parse_matrix",
    # Viz
    "draw_trace",
    # Utils
    "shape",
    "check_matrix",
    "copy_matrix",
    "to_fractions",
    "is_zero",
]
