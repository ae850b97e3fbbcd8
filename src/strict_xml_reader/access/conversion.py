"""Text conversion primitives shared by the child and attribute accessors.

Numbers are always read with ``.`` as the decimal point, independent of the
process locale. Only ASCII decimal notation is accepted: an optional sign,
ASCII digits with an optional fraction, and an optional exponent. Digit
grouping underscores and non-ASCII digits, which Python's own converters
would take, count as malformed. Malformed numeric text does not raise: it
converts to the zero value of the requested type (``number_type()``), which
callers relying on strict numbers must check for themselves.
"""

import logging
import re
from typing import Callable, FrozenSet, Optional, TypeVar

from strict_xml_reader.shared import get_logger

T = TypeVar("T")

CHILD_TRUE_VALUES: FrozenSet[str] = frozenset({"1", "yes", "True"})
ATTRIBUTE_TRUE_VALUES: FrozenSet[str] = frozenset({"1", "yes"})

DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_logger = get_logger(__name__, component="conversion")


def strip_spaces(text: str) -> str:
    """Remove every space character (U+0020) from ``text``."""
    return text.replace(" ", "")


def parse_number(text: str, number_type: Callable[..., T] = int) -> T:
    """Convert ``text`` to ``number_type`` with a fixed decimal point.

    Args:
        text: Text to convert; spaces are removed first
        number_type: ``int``, ``float``, ``Decimal`` or another callable that
            accepts a string and whose no-argument call gives its zero value

    Returns:
        The converted number, or ``number_type()`` if the text is malformed

    Examples:
        >>> parse_number("4 2")
        42
        >>> parse_number("42.9", float)
        42.9
        >>> parse_number("fred")
        0
        >>> parse_number("4_2")
        0
    """
    stripped = strip_spaces(text).strip()
    if DECIMAL_PATTERN.fullmatch(stripped):
        try:
            return number_type(stripped)
        except (ValueError, ArithmeticError, TypeError):
            pass

    if _logger.is_enabled_for(logging.DEBUG):
        _logger.debug(
            "Malformed numeric text, using zero value",
            extra={"text": text, "number_type": getattr(number_type, "__name__", "?")}
        )
    return number_type()


def parse_optional_number(
    text: Optional[str], number_type: Callable[..., T] = int
) -> Optional[T]:
    """Convert ``text`` like :func:`parse_number`, passing ``None`` through."""
    if text is None:
        return None
    return parse_number(text, number_type)


def child_truth(text: str) -> bool:
    """Truth value of element content."""
    return text in CHILD_TRUE_VALUES


def attribute_truth(text: str) -> bool:
    """Truth value of an attribute; ``"True"`` is not a true attribute value."""
    return text in ATTRIBUTE_TRUE_VALUES


__all__ = [
    "ATTRIBUTE_TRUE_VALUES",
    "CHILD_TRUE_VALUES",
    "attribute_truth",
    "child_truth",
    "parse_number",
    "parse_optional_number",
    "strip_spaces",
]
