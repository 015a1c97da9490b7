"""Small character, number, output, memory, string and linked-list helpers."""

__version__ = "0.1.0"