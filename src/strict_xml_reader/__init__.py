"""Strict XML Reader.

Typed, fail-fast access to parsed XML documents. Children and attributes are
looked up by name with uniqueness checks, and ``done()`` verifies that no
element was left unread, so walking a document doubles as validating it.

Progressive API Disclosure:
- Level 1: Simple functions - load(), load_string(), load_file()
- Level 2: Document and Node classes with a ReaderConfig
- Level 3: Tree layer - parse_* functions and the TreeNode model
"""

__version__ = "0.1.0"
__author__ = "Strict XML Reader Team"

# Progressive API disclosure - Level 1: Simple functions
from .api import load, load_file, load_string

# Progressive API disclosure - Level 2: Documents and node views
from .access import Document, Node

# Configuration and errors
from .shared import (
    AlreadyParsedError,
    ConfigError,
    ConfigValidationError,
    DuplicateTagError,
    MissingAttributeError,
    MissingTagError,
    NoPositionError,
    ParseEngine,
    ParseFailureError,
    ReaderConfig,
    SourceNotFoundError,
    UnexpectedTagError,
    UnrecognisedRootError,
    XMLReaderError,
)

# Progressive API disclosure - Level 3: Tree layer
from .tree import NodeKind, TreeHandle, TreeNode

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple loading functions
    "load",
    "load_file",
    "load_string",

    # Level 2: Documents and node views
    "Document",
    "Node",

    # Configuration
    "ParseEngine",
    "ReaderConfig",

    # Errors
    "AlreadyParsedError",
    "ConfigError",
    "ConfigValidationError",
    "DuplicateTagError",
    "MissingAttributeError",
    "MissingTagError",
    "NoPositionError",
    "ParseFailureError",
    "SourceNotFoundError",
    "UnexpectedTagError",
    "UnrecognisedRootError",
    "XMLReaderError",

    # Level 3: Tree layer
    "NodeKind",
    "TreeHandle",
    "TreeNode",
]
