from .elementary import (
    row_swap_,
    row_mul_,
    row_add_,
    row_swap,
    row_mul,
    row_add,
)

__all__ = [
    "row_swap_",
    "row_mul_",
    "row_add_",
    "row_swap",
    "row_mul",
    "row_add",
]
