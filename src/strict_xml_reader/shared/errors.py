"""Exception hierarchy for the strict XML reader.

Every failure raised by the reader derives from :class:`XMLReaderError`, so
callers can catch the whole family with a single ``except`` clause or pick out
individual conditions. Each exception keeps the message and exposes the names
involved as attributes.
"""

from typing import Optional


class XMLReaderError(Exception):
    """Base exception for all reader failures."""


class SourceNotFoundError(XMLReaderError):
    """Raised when ``read_file`` is given a path that does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"XML file {path} does not exist")
        self.path = path


class ParseFailureError(XMLReaderError):
    """Raised when the parse engine rejects a source."""

    def __init__(self, message: str, source: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None) -> None:
        super().__init__(message)
        self.source = source
        self.line = line
        self.column = column


class AlreadyParsedError(XMLReaderError):
    """Raised when a document is asked to read a second source."""

    def __init__(self, root_name: Optional[str] = None) -> None:
        super().__init__("XML document has already been read")
        self.root_name = root_name


class UnrecognisedRootError(XMLReaderError):
    """Raised when the root element is not the one the caller expected."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            f"unrecognised root node {actual} (expected {expected})"
        )
        self.expected = expected
        self.actual = actual


class NoPositionError(XMLReaderError):
    """Raised when a node view is used before it is bound to a tree node."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} called on a node with no XML position")
        self.operation = operation


class MissingTagError(XMLReaderError):
    """Raised when a required child element is absent."""

    def __init__(self, tag_name: str, parent_name: str) -> None:
        super().__init__(f"missing XML tag {tag_name} in {parent_name}")
        self.tag_name = tag_name
        self.parent_name = parent_name


class DuplicateTagError(XMLReaderError):
    """Raised when more than one child matches a single-valued lookup."""

    def __init__(self, tag_name: str, parent_name: str, count: int) -> None:
        super().__init__(
            f"duplicate XML tag {tag_name} in {parent_name} ({count} found)"
        )
        self.tag_name = tag_name
        self.parent_name = parent_name
        self.count = count


class MissingAttributeError(XMLReaderError):
    """Raised when a required attribute is absent."""

    def __init__(self, attribute_name: str, node_name: str) -> None:
        super().__init__(f"missing attribute {attribute_name} in {node_name}")
        self.attribute_name = attribute_name
        self.node_name = node_name


class UnexpectedTagError(XMLReaderError):
    """Raised by ``done()`` for an element child nobody looked at."""

    def __init__(self, tag_name: str, parent_name: str,
                 path: Optional[str] = None) -> None:
        super().__init__(f"unexpected XML node {tag_name} in {parent_name}")
        self.tag_name = tag_name
        self.parent_name = parent_name
        self.path = path
