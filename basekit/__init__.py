"""ASCII character tests, number parsing, string and byte-buffer helpers, a linked list, printf formatting, coloured output and line reading."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "conv",
    "strings",
    "output",
    "linkedlist",
    "memory",
    "printf",
    "reader",
]