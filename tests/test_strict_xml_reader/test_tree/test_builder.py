"""Tests for ingesting engine output into TreeNode trees."""

import io
from pathlib import Path

import pytest

from strict_xml_reader.shared import (
    ParseEngine,
    ParseFailureError,
    ReaderConfig,
    SourceNotFoundError,
)
from strict_xml_reader.tree import NodeKind, parse_file, parse_stream, parse_string


def _kinds(node):
    return [child.kind for child in node.children]


class TestParseString:
    """Test parse_string with both engines."""

    def test_elements_and_text(self, config: ReaderConfig) -> None:
        """Test element structure and text nodes are ingested in order."""
        handle = parse_string("<root>head<a>1</a>mid<b/>tail</root>", config)
        root = handle.root

        assert handle.engine is config.engine
        assert root.name == "root"
        assert _kinds(root) == [
            NodeKind.TEXT, NodeKind.ELEMENT, NodeKind.TEXT,
            NodeKind.ELEMENT, NodeKind.TEXT,
        ]
        assert [child.value for child in root.children if not child.is_element] == [
            "head", "mid", "tail"
        ]
        assert root.children[1].children[0].value == "1"
        assert root.children[1].parent is root

    def test_comments_are_kept(self, config: ReaderConfig) -> None:
        """Test comments become COMMENT nodes."""
        root = parse_string("<root><!--note--><a/></root>", config).root

        assert _kinds(root) == [NodeKind.COMMENT, NodeKind.ELEMENT]
        assert root.children[0].value == "note"

    def test_processing_instructions_are_dropped(self, config: ReaderConfig) -> None:
        """Test processing instructions are not ingested."""
        root = parse_string("<root><?target data?><a/></root>", config).root

        assert _kinds(root) == [NodeKind.ELEMENT]

    def test_attributes(self, config: ReaderConfig) -> None:
        """Test attributes are ingested without namespace declarations."""
        root = parse_string(
            '<root xmlns:x="urn:x" a="1" x:b="2" xml:lang="en"/>', config
        ).root

        assert root.attributes == {"a": "1", "x:b": "2", "xml:lang": "en"}

    def test_namespaces(self, config: ReaderConfig) -> None:
        """Test local names, prefixes and URIs."""
        root = parse_string('<p:root xmlns:p="urn:p"><p:child/></p:root>', config).root
        child = root.element_children()[0]

        assert root.name == "root"
        assert root.namespace_prefix == "p"
        assert root.namespace_uri == "urn:p"
        assert child.name == "child"
        assert child.namespace_uri == "urn:p"

    def test_malformed(self, config: ReaderConfig) -> None:
        """Test malformed input raises ParseFailureError with the engine error chained."""
        with pytest.raises(ParseFailureError) as info:
            parse_string("<root><a></root>", config, source="broken.xml")

        assert info.value.source == "broken.xml"
        assert info.value.__cause__ is not None

    def test_size_limit(self) -> None:
        """Test input over the limit is refused."""
        config = ReaderConfig(max_input_size_bytes=4)

        with pytest.raises(ParseFailureError, match="exceeding the 4 byte limit"):
            parse_string("<root/>", config)

    def test_default_config(self) -> None:
        """Test parsing without a config uses expat."""
        assert parse_string("<root/>").engine is ParseEngine.EXPAT


class TestCdataHandling:
    """Test how each engine reports CDATA sections."""

    def test_expat_keeps_cdata_distinct(self) -> None:
        """Test expat ingestion produces CDATA nodes."""
        root = parse_string("<root>a<![CDATA[<b>]]>c</root>").root

        assert _kinds(root) == [NodeKind.TEXT, NodeKind.CDATA, NodeKind.TEXT]
        assert root.children[1].value == "<b>"

    def test_lxml_folds_cdata_into_text(self) -> None:
        """Test lxml ingestion reports CDATA content as text."""
        root = parse_string("<root>a<![CDATA[<b>]]>c</root>", ReaderConfig.lxml()).root

        assert [child.kind for child in root.children] == [NodeKind.TEXT]
        assert root.children[0].value == "a<b>c"


class TestParseFileAndStream:
    """Test file and stream sources."""

    def test_parse_file(self, reference_xml_path: Path, config: ReaderConfig) -> None:
        """Test parsing the reference file."""
        handle = parse_file(reference_xml_path, config)

        assert handle.root.name == "A"
        assert handle.source == str(reference_xml_path)

    def test_parse_file_accepts_str(self, reference_xml_path: Path) -> None:
        """Test string paths are accepted."""
        assert parse_file(str(reference_xml_path)).root.name == "A"

    def test_parse_file_missing(self, tmp_path: Path) -> None:
        """Test a missing file raises SourceNotFoundError."""
        with pytest.raises(SourceNotFoundError, match="does not exist"):
            parse_file(tmp_path / "nope.xml")

    def test_parse_file_directory(self, tmp_path: Path) -> None:
        """Test a directory is not a readable source."""
        with pytest.raises(SourceNotFoundError):
            parse_file(tmp_path)

    def test_parse_stream_uses_name(self, tmp_path: Path, config: ReaderConfig) -> None:
        """Test a file object's name becomes the source description."""
        path = tmp_path / "doc.xml"
        path.write_text("<doc/>", encoding="utf-8")

        with open(path, "rb") as stream:
            handle = parse_stream(stream, config)

        assert handle.root.name == "doc"
        assert handle.source == str(path)

    def test_parse_stream_without_name(self) -> None:
        """Test anonymous streams are described generically."""
        handle = parse_stream(io.BytesIO(b"<doc/>"))

        assert handle.source == "<stream>"
