"""A printf-style formatter with character, byte, string, output and linked-list helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "linkedlist", "formatter"]