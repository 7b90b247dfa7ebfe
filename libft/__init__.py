"""Character, byte-buffer, string, output and linked-list helpers."""

__version__ = "0.1.0"
__all__ = ["charclass", "memory", "strings", "output", "linkedlist"]