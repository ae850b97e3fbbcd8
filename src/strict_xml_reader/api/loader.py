"""Module-level loading functions.

These are the simplest entry points: each builds a :class:`Document`, reads
the given source into it and returns it ready for navigation. Use the
:class:`Document` class directly to control when reading happens.
"""

from pathlib import Path
from typing import IO, Any, Optional, Union

from strict_xml_reader.access import Document
from strict_xml_reader.shared import ReaderConfig, get_logger

# Type definitions for input data
InputType = Union[str, bytes, Path, IO[Any]]


def load(
    source: InputType,
    root_name: Optional[str] = None,
    config: Optional[ReaderConfig] = None,
) -> Document:
    """Load a document from a path, in-memory text or file-like object.

    ``str`` and ``bytes`` are always treated as XML text; pass a
    :class:`~pathlib.Path` (or use :func:`load_file`) to read a file.

    Examples:
        >>> document = load("<root><item>value</item></root>", "root")
        >>> document.string_child("item")
        'value'
    """
    config = config or ReaderConfig()
    logger = get_logger(__name__, config.correlation_id, "load")
    logger.debug(
        "Loading XML document",
        extra={"input_type": type(source).__name__, "root": root_name}
    )

    if isinstance(source, Path):
        return load_file(source, root_name, config)
    if isinstance(source, (str, bytes)):
        return load_string(source, root_name, config)
    if hasattr(source, "read"):
        document = Document(root_name, config=config)
        document.read_stream(source)
        return document
    raise TypeError(f"Cannot load XML from {type(source).__name__}")


def load_string(
    text: Union[str, bytes],
    root_name: Optional[str] = None,
    config: Optional[ReaderConfig] = None,
) -> Document:
    """Load a document from in-memory XML text."""
    document = Document(root_name, config=config)
    document.read_string(text)
    return document


def load_file(
    path: Union[str, Path],
    root_name: Optional[str] = None,
    config: Optional[ReaderConfig] = None,
) -> Document:
    """Load a document from an XML file.

    Examples:
        >>> document = load_file("cinema.xml", "Cinema")  # doctest: +SKIP
        >>> document.root_name  # doctest: +SKIP
        'Cinema'
    """
    return Document(root_name, path, config=config)
