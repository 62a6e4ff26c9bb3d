from .log import (
    Sink,
    format_matrix,
    print_matrix,
    TraceStep,
    EliminationTrace,
)

__all__ = [
    "Sink",
    "format_matrix",
    "print_matrix",
    "TraceStep",
    "EliminationTrace",
]
