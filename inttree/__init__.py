"""A binary search tree of integers and an interactive shell for it."""

__version__ = "0.1.0"
__all__ = ["tree", "shell"]