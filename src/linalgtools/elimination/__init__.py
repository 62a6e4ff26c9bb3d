from .window import RowWindow, first_nonzero_column, ref_pass
from .echelon import ref_, rref_, ref, rref, row_reduce, exact_rank
from .checks import leading_columns, is_row_echelon, is_reduced_row_echelon

__all__ = [
    "RowWindow",
    "first_nonzero_column",
    "ref_pass",
    "ref_",
    "rref_",
    "ref",
    "rref",
    "row_reduce",
    "exact_rank",
    "leading_columns",
    "is_row_echelon",
    "is_reduced_row_echelon",
]
