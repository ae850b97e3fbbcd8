"""Strict accessor layer: Node views and Documents.

Key Components:
    Node: View onto one element with uniqueness-checked lookups and done()
    Document: A Node rooted at a parsed document's top element
"""

from .conversion import (
    ATTRIBUTE_TRUE_VALUES,
    CHILD_TRUE_VALUES,
    parse_number,
)
from .document import Document
from .node import Node

__all__ = [
    "ATTRIBUTE_TRUE_VALUES",
    "CHILD_TRUE_VALUES",
    "Document",
    "Node",
    "parse_number",
]
