"""Convenience API for the strict XML reader."""

from .loader import load, load_file, load_string

__all__ = [
    "load",
    "load_file",
    "load_string",
]
