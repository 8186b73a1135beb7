"""Bounded integer min-heap (``heap``) and a line-oriented command interface (``cli``)."""

__version__ = "0.1.0"
__all__ = ["heap", "cli"]