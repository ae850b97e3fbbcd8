"""Tree layer for the strict XML reader.

This package turns the output of a parse engine into the read-only,
kind-tagged tree that the access layer navigates.

Key Components:
    TreeNode: One node of an ingested tree, tagged with its NodeKind
    TreeHandle: A parsed tree plus the engine and source it came from
    parse_file / parse_string / parse_stream: Run an engine over a source
"""

from .builder import (
    parse_file,
    parse_stream,
    parse_string,
)
from .model import (
    NodeKind,
    TreeHandle,
    TreeNode,
)

__all__ = [
    "NodeKind",
    "TreeHandle",
    "TreeNode",
    "parse_file",
    "parse_stream",
    "parse_string",
]
