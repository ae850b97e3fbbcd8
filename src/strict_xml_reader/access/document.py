"""Documents: a parse session plus a Node view of its root element."""

from pathlib import Path
from typing import IO, Any, Callable, Optional, Union

from strict_xml_reader.access.node import Node
from strict_xml_reader.shared import (
    AlreadyParsedError,
    ParseEngine,
    ReaderConfig,
    UnrecognisedRootError,
    get_logger,
)
from strict_xml_reader.tree import TreeHandle, parse_file, parse_stream, parse_string


class Document(Node):
    """An XML document read once and navigated as a :class:`Node`.

    The expected root name may be given up front, in which case reading a
    document with any other root element fails. Without one, whatever root
    the document has is accepted and becomes :attr:`root_name`.

    A Document reads exactly one source. Until that read succeeds it is an
    unbound view, and a second ``read_*`` call raises
    :class:`AlreadyParsedError`, whether or not the first one succeeded.
    """

    def __init__(
        self,
        root_name: Optional[str] = None,
        path: Optional[Union[str, Path]] = None,
        config: Optional[ReaderConfig] = None,
    ) -> None:
        """Initialize the document, optionally reading ``path`` immediately.

        Args:
            root_name: Expected name of the root element; empty or ``None``
                accepts any root
            path: File to read straight away
            config: Reader configuration selecting engine and limits
        """
        super().__init__()
        self._config = config or ReaderConfig()
        self._root_name = root_name or None
        self._handle: Optional[TreeHandle] = None
        self._read_attempted = False
        self._logger = get_logger(__name__, self._config.correlation_id, "document")

        if path is not None:
            self.read_file(path)

    def __repr__(self) -> str:
        state = "parsed" if self.parsed else "unread"
        return f"<Document {self._root_name or '*'} ({state})>"

    @property
    def root_name(self) -> Optional[str]:
        """Expected root name, or the adopted one after a successful read."""
        return self._root_name

    @property
    def parsed(self) -> bool:
        """Check if a source has been read successfully."""
        return self._handle is not None

    @property
    def config(self) -> ReaderConfig:
        """Reader configuration in use."""
        return self._config

    @property
    def engine(self) -> ParseEngine:
        """Parse engine used, or configured, for this document."""
        if self._handle is not None:
            return self._handle.engine
        return self._config.engine

    @property
    def source(self) -> Optional[str]:
        """Description of the source read, once parsed."""
        return self._handle.source if self._handle is not None else None

    def read_file(self, path: Union[str, Path]) -> None:
        """Read the document from a file.

        Raises:
            SourceNotFoundError: If ``path`` does not exist
            ParseFailureError: If the file is not well-formed XML
            UnrecognisedRootError: If the root element is not the expected one
            AlreadyParsedError: If this document has already read a source
        """
        self._read(lambda: parse_file(path, self._config))

    def read_string(self, text: Union[str, bytes]) -> None:
        """Read the document from in-memory text.

        Raises:
            ParseFailureError: If the text is not well-formed XML
            UnrecognisedRootError: If the root element is not the expected one
            AlreadyParsedError: If this document has already read a source
        """
        self._read(lambda: parse_string(text, self._config))

    def read_stream(self, stream: IO[Any]) -> None:
        """Read the document from a text or binary file-like object."""
        self._read(lambda: parse_stream(stream, self._config))

    def _read(self, parse: Callable[[], TreeHandle]) -> None:
        if self._read_attempted:
            raise AlreadyParsedError(self._root_name)
        self._read_attempted = True

        self._take_root_node(parse())

    def _take_root_node(self, handle: TreeHandle) -> None:
        actual = handle.root.name
        if self._root_name and actual != self._root_name:
            raise UnrecognisedRootError(self._root_name, actual)

        if not self._root_name:
            self._root_name = actual
            self._logger.debug("Adopted root name", extra={"root": actual})

        self._handle = handle
        self._node = handle.root
