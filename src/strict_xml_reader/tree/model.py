"""Kind-tagged tree model consumed by the reader.

The parse engines produce their own DOM flavours; ingestion converts either of
them into :class:`TreeNode` objects whose :class:`NodeKind` is fixed at
construction time, so the access layer can tell elements from character data
with a plain enum comparison.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterator, List, Optional

from strict_xml_reader.shared import ParseEngine

_KIND_NAMES = {
    "TEXT": "#text",
    "CDATA": "#cdata-section",
    "COMMENT": "#comment",
}


class NodeKind(Enum):
    """Kinds of node the reader distinguishes."""

    ELEMENT = auto()
    TEXT = auto()
    CDATA = auto()
    COMMENT = auto()


@dataclass(eq=False)
class TreeNode:
    """One node of an ingested XML tree.

    Element nodes carry a local ``name``, namespace metadata, attributes and
    ordered children. Character data nodes carry their text in ``value``.
    """

    kind: NodeKind
    name: str = ""
    value: str = ""
    namespace_uri: str = ""
    namespace_prefix: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["TreeNode"] = field(default_factory=list)
    parent: Optional["TreeNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate node values and establish parent-child relationships."""
        if self.kind is NodeKind.ELEMENT:
            if not self.name:
                raise ValueError("Element name cannot be empty")
        else:
            if self.attributes:
                raise ValueError("Only elements can carry attributes")
            if self.children:
                raise ValueError("Only elements can have children")
            if not self.name:
                self.name = _KIND_NAMES[self.kind.name]

        for child in self.children:
            child.parent = self

    @classmethod
    def element(
        cls,
        name: str,
        attributes: Optional[Dict[str, str]] = None,
        children: Optional[List["TreeNode"]] = None,
        namespace_uri: str = "",
        namespace_prefix: str = "",
    ) -> "TreeNode":
        """Create an element node."""
        return cls(
            kind=NodeKind.ELEMENT,
            name=name,
            namespace_uri=namespace_uri,
            namespace_prefix=namespace_prefix,
            attributes=dict(attributes or {}),
            children=list(children or []),
        )

    @classmethod
    def text(cls, value: str) -> "TreeNode":
        """Create a text node."""
        return cls(kind=NodeKind.TEXT, value=value)

    @classmethod
    def cdata(cls, value: str) -> "TreeNode":
        """Create a CDATA section node."""
        return cls(kind=NodeKind.CDATA, value=value)

    @classmethod
    def comment(cls, value: str) -> "TreeNode":
        """Create a comment node."""
        return cls(kind=NodeKind.COMMENT, value=value)

    @property
    def is_element(self) -> bool:
        """Check if this node is an element."""
        return self.kind is NodeKind.ELEMENT

    def add_child(self, child: "TreeNode") -> None:
        """Append a child node; only used while a tree is being ingested."""
        if not self.is_element:
            raise ValueError("Only elements can have children")
        child.parent = self
        self.children.append(child)

    def element_children(self) -> List["TreeNode"]:
        """Get direct children that are elements, in document order."""
        return [child for child in self.children if child.is_element]

    def iter_elements(self) -> Iterator["TreeNode"]:
        """Iterate over this element and all descendant elements, pre-order."""
        if not self.is_element:
            return
        yield self
        for child in self.children:
            yield from child.iter_elements()

    def get_path(self) -> str:
        """Get XPath-like path to this node, used in error messages."""
        if self.parent is None:
            return f"/{self.name}"

        parent_path = self.parent.get_path()
        siblings = [
            child for child in self.parent.children
            if child.kind is self.kind and child.name == self.name
        ]
        if len(siblings) > 1:
            position = next(
                index for index, sibling in enumerate(siblings, 1) if sibling is self
            )
            return f"{parent_path}/{self.name}[{position}]"
        return f"{parent_path}/{self.name}"


@dataclass
class TreeHandle:
    """A successfully parsed tree and where it came from."""

    root: TreeNode
    engine: ParseEngine
    source: str = "<string>"

    def __post_init__(self) -> None:
        """Validate the handle."""
        if not self.root.is_element:
            raise ValueError("Tree root must be an element")
