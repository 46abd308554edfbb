"""Character, memory, string, conversion, output and linked-list helpers with C-style semantics."""

__version__ = "0.1.0"

__all__ = [
    "charclass",
    "memory",
    "convert",
    "cstring",
    "strutil",
    "output",
    "linkedlist",
]