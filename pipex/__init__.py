"""Run two commands joined by a pipe between an input file and an output file, with small string, byte and list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "command",
    "errors",
    "linkedlist",
    "memory",
    "output",
    "pipeline",
    "text",
    "transform",
]