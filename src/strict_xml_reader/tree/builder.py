"""Tree ingestion from the supported parse engines.

This module runs the selected engine over a source and converts the engine's
DOM into :class:`~strict_xml_reader.tree.model.TreeNode` objects. It is the
only place that knows about ``xml.dom.minidom`` and ``lxml.etree``; engine
exceptions are re-raised as :class:`ParseFailureError`.
"""

import time
from pathlib import Path
from typing import IO, Any, Optional, Union
from xml.dom import Node as DomNode
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from lxml import etree

from strict_xml_reader.shared import (
    ParseEngine,
    ParseFailureError,
    ReaderConfig,
    SourceNotFoundError,
    get_logger,
)
from strict_xml_reader.tree.model import TreeHandle, TreeNode

SourceData = Union[str, bytes]

MS_PER_SECOND = 1000
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def parse_string(
    text: SourceData,
    config: Optional[ReaderConfig] = None,
    source: str = "<string>",
) -> TreeHandle:
    """Parse an in-memory XML document.

    Args:
        text: XML content as ``str`` or ``bytes``
        config: Reader configuration selecting the engine
        source: Description of where the text came from, used in messages

    Returns:
        TreeHandle wrapping the ingested root element

    Raises:
        ParseFailureError: If the engine rejects the text or it is too large
    """
    config = config or ReaderConfig()
    logger = get_logger(__name__, config.correlation_id, "tree_builder")
    start_time = time.time()

    _check_size(text, config, source)
    logger.debug(
        "Parsing XML source",
        extra={"source": source, "engine": config.engine.value}
    )

    if config.engine is ParseEngine.LXML:
        root = _parse_with_lxml(text, config, source)
    else:
        root = _parse_with_expat(text, source)

    processing_time = (time.time() - start_time) * MS_PER_SECOND
    logger.info(
        "Parsed XML source",
        extra={
            "source": source,
            "engine": config.engine.value,
            "root": root.name,
            "processing_time_ms": processing_time,
        }
    )
    return TreeHandle(root=root, engine=config.engine, source=source)


def parse_file(
    path: Union[str, Path],
    config: Optional[ReaderConfig] = None,
) -> TreeHandle:
    """Parse an XML file.

    Raises:
        SourceNotFoundError: If ``path`` is not an existing file
        ParseFailureError: If the engine rejects the file or it is too large
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SourceNotFoundError(str(file_path))

    config = config or ReaderConfig()
    limit = config.max_input_size_bytes
    if limit is not None and file_path.stat().st_size > limit:
        raise ParseFailureError(
            f"XML file {file_path} exceeds the {limit} byte input limit",
            source=str(file_path),
        )

    return parse_string(file_path.read_bytes(), config, source=str(file_path))


def parse_stream(
    stream: IO[Any],
    config: Optional[ReaderConfig] = None,
) -> TreeHandle:
    """Parse XML read from a text or binary file-like object."""
    source = str(getattr(stream, "name", "<stream>"))
    return parse_string(stream.read(), config, source=source)


def _check_size(text: SourceData, config: ReaderConfig, source: str) -> None:
    limit = config.max_input_size_bytes
    if limit is None:
        return
    size = len(text.encode("utf-8")) if isinstance(text, str) else len(text)
    if size > limit:
        raise ParseFailureError(
            f"XML source {source} is {size} bytes, exceeding the {limit} byte limit",
            source=source,
        )


# Expat / minidom engine

def _parse_with_expat(text: SourceData, source: str) -> TreeNode:
    try:
        dom = minidom.parseString(text)
    except ExpatError as e:
        raise ParseFailureError(
            f"could not parse XML {source}: {e}",
            source=source,
            line=e.lineno,
            column=e.offset,
        ) from e

    try:
        return _ingest_dom_element(dom.documentElement)
    finally:
        dom.unlink()


def _ingest_dom_element(dom_element: Any) -> TreeNode:
    tag_name = dom_element.tagName
    element = TreeNode.element(
        dom_element.localName or tag_name.split(":", 1)[-1],
        attributes={
            name: value for name, value in dom_element.attributes.items()
            if name != "xmlns" and not name.startswith("xmlns:")
        },
        namespace_uri=dom_element.namespaceURI or "",
        namespace_prefix=dom_element.prefix or "",
    )

    for dom_child in dom_element.childNodes:
        node_type = dom_child.nodeType
        if node_type == DomNode.ELEMENT_NODE:
            element.add_child(_ingest_dom_element(dom_child))
        elif node_type == DomNode.TEXT_NODE:
            element.add_child(TreeNode.text(dom_child.data))
        elif node_type == DomNode.CDATA_SECTION_NODE:
            element.add_child(TreeNode.cdata(dom_child.data))
        elif node_type == DomNode.COMMENT_NODE:
            element.add_child(TreeNode.comment(dom_child.data))
        # Processing instructions are not part of the reader's model

    return element


# lxml engine

def _parse_with_lxml(text: SourceData, config: ReaderConfig, source: str) -> TreeNode:
    # lxml refuses str input that carries an encoding declaration, so str is
    # handed over as UTF-8 with the parser told to ignore the declaration
    is_text = isinstance(text, str)
    parser = etree.XMLParser(
        resolve_entities=True if config.allow_external_entities else "internal",
        no_network=not config.allow_external_entities,
        remove_comments=False,
        remove_pis=True,
        encoding="utf-8" if is_text else None,
    )
    data = text.encode("utf-8") if is_text else text

    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        line, column = e.position
        raise ParseFailureError(
            f"could not parse XML {source}: {e}",
            source=source,
            line=line,
            column=column,
        ) from e
    except ValueError as e:
        raise ParseFailureError(f"could not parse XML {source}: {e}", source=source) from e

    return _ingest_lxml_element(root)


def _ingest_lxml_element(lxml_element: Any) -> TreeNode:
    qname = etree.QName(lxml_element)
    element = TreeNode.element(
        qname.localname,
        attributes={
            _lxml_attribute_name(lxml_element, key): value
            for key, value in lxml_element.attrib.items()
        },
        namespace_uri=qname.namespace or "",
        namespace_prefix=lxml_element.prefix or "",
    )

    if lxml_element.text:
        element.add_child(TreeNode.text(lxml_element.text))

    for lxml_child in lxml_element:
        if lxml_child.tag is etree.Comment:
            element.add_child(TreeNode.comment(lxml_child.text or ""))
        elif lxml_child.tag is etree.PI or lxml_child.tag is etree.Entity:
            # Entity nodes left here are unresolved external references
            pass
        else:
            element.add_child(_ingest_lxml_element(lxml_child))

        if lxml_child.tail:
            element.add_child(TreeNode.text(lxml_child.tail))

    return element


def _lxml_attribute_name(lxml_element: Any, key: str) -> str:
    """Turn a Clark-notation attribute key back into ``prefix:name``."""
    qname = etree.QName(key)
    if not qname.namespace:
        return qname.localname
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"

    for prefix, uri in lxml_element.nsmap.items():
        if uri == qname.namespace and prefix:
            return f"{prefix}:{qname.localname}"
    return qname.localname
