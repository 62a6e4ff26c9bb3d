from .parse import strip_brackets, parse_matrix

__all__ = ["strip_brackets", "parse_matrix"]
