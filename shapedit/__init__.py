"""A small vector shape editor with grouping, undo, styling and text save/load."""

__version__ = "0.1.0"
__all__ = ["__version__"]