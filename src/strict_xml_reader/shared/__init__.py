"""Shared utilities for the strict XML reader.

This package provides the configuration object, the exception hierarchy and
the correlation-aware logger used across the tree and access layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ParseEngine,
    ReaderConfig,
)
from .errors import (
    AlreadyParsedError,
    DuplicateTagError,
    MissingAttributeError,
    MissingTagError,
    NoPositionError,
    ParseFailureError,
    SourceNotFoundError,
    UnexpectedTagError,
    UnrecognisedRootError,
    XMLReaderError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ParseEngine",
    "ReaderConfig",
    "AlreadyParsedError",
    "DuplicateTagError",
    "MissingAttributeError",
    "MissingTagError",
    "NoPositionError",
    "ParseFailureError",
    "SourceNotFoundError",
    "UnexpectedTagError",
    "UnrecognisedRootError",
    "XMLReaderError",
    "CorrelationLogger",
    "get_logger",
]
