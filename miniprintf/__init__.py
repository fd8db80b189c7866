"""A small printf-style formatter for a handful of basic conversions."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]