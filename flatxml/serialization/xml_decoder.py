"""Convert XML to records."""

import logging
import xml.etree.ElementTree as ET
from typing import Any, BinaryIO, TypeVar, get_args

from pydantic import BaseModel, ValidationError

from flatxml.exceptions import StructuralError
from flatxml.types import TEXT_KEY, EmptyIsAbsent, Flattened, Node, hook_marker
from flatxml.unions import decode_flattened, decode_optional, normalize_leaf

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def xml_to_record(xml: str | bytes, record_class: type[T]) -> T:
    """Parse XML and build a record from it.

    Args:
        xml: XML document as text or bytes
        record_class: Pydantic model class to build

    Returns:
        Instance of record_class with data from the XML

    Raises:
        StructuralError: If the XML is malformed or ordinary fields don't validate
        MissingVariantTag: If a union field has no recognized element
        UnexpectedShape: If a union element holds something other than text
        InvalidNumber: If a numeric element's text is not a number

    Example:
        >>> xml = '<DeviceTag><Name>MyDevice</Name><Power>3.5</Power></DeviceTag>'
        >>> xml_to_record(xml, DeviceRecord)
        DeviceRecord(name='MyDevice', control=Power(3.5))
    """
    if not (isinstance(record_class, type) and issubclass(record_class, BaseModel)):
        raise TypeError(f"Expected Pydantic BaseModel class, got {record_class}")

    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        raise StructuralError(f"Malformed XML: {e}", raw_output=xml) from e

    return mapping_to_record(element_to_mapping(root), record_class)


def read_record(stream: BinaryIO, record_class: type[T]) -> T:
    """Read a whole XML document from a binary stream and build a record from it."""
    return xml_to_record(stream.read(), record_class)


def element_to_mapping(element: ET.Element) -> dict[str, Node]:
    """Convert an XML element's children to a structural view.

    Each child becomes one entry, in document order: its text, unchanged,
    if it has no child elements, otherwise a nested mapping. Non-blank
    text beside child elements is kept, stripped, under ``$text``. Only
    the first child with a given name is kept.

    Tag names are never rewritten here; a lone ``<Text>`` child is only
    read as a text-content wrapper where a number is decoded (see
    :func:`flatxml.unions.normalize_leaf`).

    Args:
        element: The XML element whose children to convert

    Returns:
        Ordered mapping of child name to node

    Example:
        >>> root = ET.fromstring('<D><Name>A</Name><Voltage><Text>2.0</Text></Voltage></D>')
        >>> element_to_mapping(root)
        {'Name': 'A', 'Voltage': {'Text': '2.0'}}
    """
    result: dict[str, Node] = {}

    # Mixed content: text alongside child elements
    text = "".join([element.text or ""] + [child.tail or "" for child in element]).strip()
    if text:
        result[TEXT_KEY] = text

    for child in element:
        if child.tag in result:
            logger.debug("Ignoring duplicate <%s> in <%s>", child.tag, element.tag)
            continue
        result[child.tag] = _element_to_node(child)

    return result


def _element_to_node(element: ET.Element) -> Node:
    if len(element) == 0:
        return element.text or ""
    return element_to_mapping(element)


def mapping_to_record(children: dict[str, Node], record_class: type[T]) -> T:
    """Build a record from a structural view of its element's children.

    Ordinary fields are looked up by alias. Fields marked ``Flattened``
    are decoded from the first child named after one of their variants,
    wherever it appears. Fields marked ``EmptyIsAbsent`` are None when
    missing or empty.
    """
    data = {}

    for field_name, field_info in record_class.model_fields.items():
        key = field_info.alias or field_name
        marker = hook_marker(field_info)

        if isinstance(marker, Flattened):
            data[key] = decode_flattened(children, marker.registry)

        elif isinstance(marker, EmptyIsAbsent):
            node = children.get(key)
            text = None if node is None else normalize_leaf(key, node).text
            data[key] = decode_optional(text, field=key)

        elif key in children:
            data[key] = _node_to_value(children[key], field_info.annotation)

    try:
        return record_class.model_validate(data)
    except ValidationError as e:
        raise StructuralError(
            f"{record_class.__name__} failed validation: {e}", raw_output=children
        ) from e


def _node_to_value(node: Node, field_type: Any) -> Any:
    """Convert a node for an ordinary field, descending into nested records."""
    if isinstance(node, dict):
        nested_class = _model_class(field_type)
        if nested_class is not None:
            return mapping_to_record(node, nested_class)
    # Leaves are passed to Pydantic as text for coercion
    return node


def _model_class(field_type: Any) -> type[BaseModel] | None:
    """Return the Pydantic model in a type hint, unwrapping Optional."""
    candidates = [field_type, *get_args(field_type)]
    for candidate in candidates:
        if isinstance(candidate, type) and issubclass(candidate, BaseModel):
            return candidate
    return None
