"""Decode and encode unions whose tag is the element name, and empty-means-absent numbers.

These are the hooks the generic serializer calls for fields marked with
:class:`~flatxml.types.Flattened` or :class:`~flatxml.types.EmptyIsAbsent`.
They work on plain structural views (see
:func:`flatxml.serialization.xml_decoder.element_to_mapping`) and never
touch ElementTree, so they can be tested on their own.
"""

import logging
from typing import Iterable, Mapping

from flatxml.config import get_settings
from flatxml.exceptions import MissingVariantTag, UnexpectedShape
from flatxml.registry import VariantRegistry
from flatxml.types import TEXT_KEY, LeafText, Node, PlainText, Variant, WrappedText
from flatxml.values import format_leaf, parse_leaf

logger = logging.getLogger(__name__)


def normalize_leaf(key: str, node: Node, text_tags: Iterable[str] | None = None) -> LeafText:
    """Classify a value node as bare text or a text-content wrapper.

    A wrapper is a mapping with exactly one entry, keyed by ``$text`` or
    by one of the text tags (``Text`` by default), whose value is a string.

    Args:
        key: Element name the node belongs to, used in errors
        node: A string, or a mapping holding only a text-content entry
        text_tags: Element names read as text content (defaults to settings)

    Returns:
        PlainText or WrappedText carrying the leaf string

    Raises:
        UnexpectedShape: If the node is any other shape
    """
    if isinstance(node, str):
        return PlainText(node)

    if isinstance(node, Mapping) and len(node) == 1:
        if text_tags is None:
            text_tags = get_settings().text_tags
        inner_key, inner = next(iter(node.items()))
        if (inner_key == TEXT_KEY or inner_key in text_tags) and isinstance(inner, str):
            return WrappedText(inner)

    raise UnexpectedShape(key, raw_output=node)


def decode_flattened(children: Mapping[str, Node], registry: VariantRegistry) -> Variant:
    """Build a union value from the first child whose name is a registered tag.

    Children are scanned in document order. The first registered tag wins
    and scanning stops there, so a later second variant element is ignored
    rather than reported.

    Args:
        children: Structural view of the parent element's children
        registry: The union's tag registry

    Returns:
        An instance of the matched variant class

    Raises:
        MissingVariantTag: If no child name is a registered tag
        UnexpectedShape: If the matched child is not text or a text wrapper
        InvalidNumber: If the matched child's text is not a number

    Example:
        >>> decode_flattened({"Name": "Lamp", "Power": "3.5"}, CONTROL_TAGS)
        Power(3.5)
    """
    for key, node in children.items():
        variant_class = registry.resolve(key)
        if variant_class is None:
            continue

        leaf = normalize_leaf(key, node)
        logger.debug("Decoding %s from <%s> (%s)", registry.name, key, type(leaf).__name__)
        return variant_class(parse_leaf(leaf.text.strip(), field=key))

    raise MissingVariantTag(registry.tags, raw_output=dict(children))


def encode_flattened(value: Variant, registry: VariantRegistry) -> tuple[str, str]:
    """Return the (element name, text) pair a union value is written as.

    Raises:
        TypeError: If value's class is not in the registry
    """
    return registry.tag_of(value), format_leaf(value.value)


def decode_optional(text: str | None, field: str | None = None) -> float | None:
    """Decode an optional number; missing, empty or blank text means no value.

    Raises:
        InvalidNumber: If the text is non-blank and not a number
    """
    text = (text or "").strip()
    if not text:
        return None
    return parse_leaf(text, field=field)


def encode_optional(value: float | None) -> str:
    """Render an optional number, writing no value as empty text."""
    if value is None:
        return ""
    return format_leaf(value)
