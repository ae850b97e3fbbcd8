"""Strict, typed access to one position in an XML tree.

A :class:`Node` is a lightweight view onto a :class:`TreeNode`. Looking a
child up by name records that name as *taken*; :meth:`Node.done` then fails
if the element has any child element that was neither looked up nor passed to
:meth:`Node.ignore_child`. Walking the fields a caller understands and
finishing with ``done()`` therefore doubles as a schema check.

Example:
    >>> from strict_xml_reader import Document
    >>> document = Document("Film")
    >>> document.read_string("<Film><Title>Heat</Title><Year>1995</Year></Film>")
    >>> document.string_child("Title")
    'Heat'
    >>> document.number_child("Year")
    1995
    >>> document.done()

The ``taken`` list is mutated by lookups, so a view must not be shared
between threads that look children up concurrently.
"""

from typing import Callable, List, Optional, Tuple, TypeVar

from strict_xml_reader.access.conversion import (
    attribute_truth,
    child_truth,
    parse_number,
    parse_optional_number,
)
from strict_xml_reader.shared import (
    DuplicateTagError,
    MissingAttributeError,
    MissingTagError,
    NoPositionError,
    UnexpectedTagError,
)
from strict_xml_reader.tree import NodeKind, TreeNode

T = TypeVar("T")


class Node:
    """A view onto one element of an externally owned tree.

    Views never copy or own the tree; every Node obtained from another Node
    refers to the same underlying :class:`TreeNode` objects. The ``taken``
    bookkeeping is local to each view.
    """

    def __init__(self, node: Optional[TreeNode] = None) -> None:
        """Initialize the view.

        Args:
            node: Tree node to view; ``None`` creates an unbound view on
                which every operation raises :class:`NoPositionError`
        """
        self._node = node
        self._taken: List[str] = []

    def __repr__(self) -> str:
        if self._node is None:
            return f"<{type(self).__name__} (unbound)>"
        return f"<{type(self).__name__} {self._node.get_path()}>"

    def __eq__(self, other: object) -> bool:
        """Views are equal when they refer to the same tree node."""
        if not isinstance(other, Node):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return hash(id(self._node))

    def _position(self, operation: str) -> TreeNode:
        if self._node is None:
            raise NoPositionError(operation)
        return self._node

    # Identity and content

    def node(self) -> Optional[TreeNode]:
        """Get the underlying tree node, or ``None`` for an unbound view."""
        return self._node

    @property
    def is_bound(self) -> bool:
        """Check if this view refers to a tree node."""
        return self._node is not None

    @property
    def taken(self) -> Tuple[str, ...]:
        """Names looked up or ignored on this view so far, in call order."""
        return tuple(self._taken)

    def name(self) -> str:
        """Get this element's tag name, without any namespace prefix."""
        return self._position("name").name

    def content(self) -> str:
        """Get the concatenated text of this node's direct text children.

        CDATA sections and comments are not part of the content. Reading the
        content does not take anything.
        """
        position = self._position("content")
        return "".join(
            child.value for child in position.children
            if child.kind is NodeKind.TEXT
        )

    def namespace_uri(self) -> str:
        """Get this node's namespace URI, or ``""``."""
        return self._position("namespace_uri").namespace_uri

    def namespace_prefix(self) -> str:
        """Get this node's namespace prefix, or ``""``."""
        return self._position("namespace_prefix").namespace_prefix

    # Child lookup

    def node_children(self, name: Optional[str] = None) -> List["Node"]:
        """Get direct child elements, optionally only those called ``name``.

        A lookup by name records ``name`` as taken even when nothing matches,
        so asking for an absent child satisfies :meth:`done`. Calling this
        without a name returns every child element and takes nothing.
        """
        position = self._position("node_children")
        if name is None:
            return [Node(child) for child in position.element_children()]

        matches = [
            Node(child) for child in position.children
            if child.kind is NodeKind.ELEMENT and child.name == name
        ]
        self._taken.append(name)
        return matches

    def node_child(self, name: str) -> "Node":
        """Get the only child element called ``name``.

        Raises:
            DuplicateTagError: If there is more than one
            MissingTagError: If there is none
        """
        matches = self.node_children(name)
        if len(matches) > 1:
            raise DuplicateTagError(name, self.name(), len(matches))
        if not matches:
            raise MissingTagError(name, self.name())
        return matches[0]

    def optional_node_child(self, name: str) -> Optional["Node"]:
        """Get the only child element called ``name``, or ``None``.

        Raises:
            DuplicateTagError: If there is more than one
        """
        matches = self.node_children(name)
        if len(matches) > 1:
            raise DuplicateTagError(name, self.name(), len(matches))
        return matches[0] if matches else None

    def ignore_child(self, name: str) -> None:
        """Mark ``name`` as taken without reading it."""
        self._position("ignore_child")
        self._taken.append(name)

    def done(self) -> None:
        """Check that every child element has been taken or ignored.

        Raises:
            UnexpectedTagError: For the first child element, in document
                order, whose name was never looked up or ignored
        """
        position = self._position("done")
        taken = set(self._taken)
        for child in position.element_children():
            if child.name not in taken:
                raise UnexpectedTagError(child.name, position.name, child.get_path())

    # Typed children

    def string_child(self, name: str) -> str:
        """Get the content of the only child element called ``name``."""
        return self.node_child(name).content()

    def optional_string_child(self, name: str) -> Optional[str]:
        """Get the content of the only child called ``name``, or ``None``."""
        child = self.optional_node_child(name)
        return child.content() if child is not None else None

    def bool_child(self, name: str) -> bool:
        """Get a child's content as a boolean.

        ``"1"``, ``"yes"`` and ``"True"`` are true; any other text is false.
        """
        return child_truth(self.string_child(name))

    def optional_bool_child(self, name: str) -> Optional[bool]:
        """Get a child's content as a boolean, or ``None`` if it is absent."""
        text = self.optional_string_child(name)
        return child_truth(text) if text is not None else None

    def number_child(self, name: str, number_type: Callable[..., T] = int) -> T:
        """Get a child's content as a number of type ``number_type``.

        Spaces are removed before conversion. Malformed text gives
        ``number_type()`` instead of an error.
        """
        return parse_number(self.string_child(name), number_type)

    def optional_number_child(
        self, name: str, number_type: Callable[..., T] = int
    ) -> Optional[T]:
        """Get a child's content as a number, or ``None`` if it is absent."""
        return parse_optional_number(self.optional_string_child(name), number_type)

    # Attributes, which are never taken

    def has_attribute(self, name: str) -> bool:
        """Check if this element has an attribute called ``name``."""
        return name in self._position("has_attribute").attributes

    def string_attribute(self, name: str) -> str:
        """Get an attribute's value.

        Raises:
            MissingAttributeError: If this node is not an element or has no
                such attribute
        """
        value = self.optional_string_attribute(name)
        if value is None:
            raise MissingAttributeError(name, self._node.name)
        return value

    def optional_string_attribute(self, name: str) -> Optional[str]:
        """Get an attribute's value, or ``None``."""
        position = self._position("optional_string_attribute")
        if not position.is_element:
            return None
        return position.attributes.get(name)

    def bool_attribute(self, name: str) -> bool:
        """Get an attribute as a boolean; only ``"1"`` and ``"yes"`` are true."""
        return attribute_truth(self.string_attribute(name))

    def optional_bool_attribute(self, name: str) -> Optional[bool]:
        """Get an attribute as a boolean, or ``None`` if it is absent."""
        value = self.optional_string_attribute(name)
        return attribute_truth(value) if value is not None else None

    def number_attribute(self, name: str, number_type: Callable[..., T] = int) -> T:
        """Get an attribute as a number, with the same leniency as children."""
        return parse_number(self.string_attribute(name), number_type)

    def optional_number_attribute(
        self, name: str, number_type: Callable[..., T] = int
    ) -> Optional[T]:
        """Get an attribute as a number, or ``None`` if it is absent."""
        return parse_optional_number(self.optional_string_attribute(name), number_type)
