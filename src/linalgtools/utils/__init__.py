from .matrix import (
    Matrix,
    Pivot,
    shape,
    check_matrix,
    check_row_index,
    copy_matrix,
    to_fractions,
    is_zero,
    is_one,
)

__all__ = [
    "Matrix",
    "Pivot",
    "shape",
    "check_matrix",
    "check_row_index",
    "copy_matrix",
    "to_fractions",
    "is_zero",
    "is_one",
]
