"""A minimal printf-style formatter with character, memory, string, output and list helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "linkedlist", "printf"]