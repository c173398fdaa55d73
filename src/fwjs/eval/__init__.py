"""Evaluator helper modules for the fwjs runtime."""

__all__ = [
    "bind",
    "common",
    "expr",
    "fn",
    "helpers",
    "loops",
]
