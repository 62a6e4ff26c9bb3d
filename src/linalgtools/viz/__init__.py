from .draw import draw_trace

__all__ = ["draw_trace"]
