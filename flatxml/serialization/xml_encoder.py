"""Convert records to XML."""

import logging
import xml.etree.ElementTree as ET
from typing import Any, BinaryIO

from pydantic import BaseModel

from flatxml.config import get_settings
from flatxml.types import EmptyIsAbsent, Flattened, hook_marker
from flatxml.unions import encode_flattened, encode_optional

logger = logging.getLogger(__name__)


def record_to_element(
    record: BaseModel,
    root_tag: str | None = None,
    pretty: bool | None = None,
    indent: str | None = None,
) -> ET.Element:
    """Build the XML element tree for a record.

    Args:
        record: The Pydantic model instance to convert
        root_tag: Tag of the root element (defaults to the record's ``xml_root``)
        pretty: Whether to indent the tree (defaults to settings)
        indent: Indentation unit (defaults to settings)

    Returns:
        The root element
    """
    if not isinstance(record, BaseModel):
        raise TypeError(f"Expected Pydantic BaseModel instance, got {type(record)}")

    settings = get_settings()
    if root_tag is None:
        root_tag = getattr(record, "xml_root", None) or type(record).__name__
    if pretty is None:
        pretty = settings.pretty_print
    if indent is None:
        indent = settings.indent

    logger.debug("Encoding %s as <%s>", type(record).__name__, root_tag)
    root = ET.Element(root_tag)
    _model_to_element(root, record)

    if pretty:
        ET.indent(root, space=indent)
    return root


def record_to_xml(
    record: BaseModel,
    root_tag: str | None = None,
    pretty: bool | None = None,
    indent: str | None = None,
) -> str:
    """Convert a record to an XML string.

    Ordinary fields become child elements named by their alias. A field
    marked ``Flattened`` becomes a single element named after the active
    variant, and a field marked ``EmptyIsAbsent`` is always written, empty
    when it has no value.

    Example:
        >>> print(record_to_xml(DeviceRecord(name="MyDevice", control=Power(3.5))))
        <DeviceTag>
          <Name>MyDevice</Name>
          <Power>3.5</Power>
        </DeviceTag>
    """
    root = record_to_element(record, root_tag, pretty, indent)
    return ET.tostring(root, encoding="unicode", method="xml")


def write_record(stream: BinaryIO, record: BaseModel, root_tag: str | None = None) -> None:
    """Write a record as an XML document, with declaration, to a binary stream."""
    root = record_to_element(record, root_tag)
    ET.ElementTree(root).write(stream, encoding=get_settings().encoding, xml_declaration=True)


def _model_to_element(parent: ET.Element, model: BaseModel) -> None:
    """Convert a Pydantic model to XML elements under parent."""
    for field_name, field_info in type(model).model_fields.items():
        value = getattr(model, field_name)
        tag = field_info.alias or field_name
        marker = hook_marker(field_info)

        if isinstance(marker, Flattened):
            variant_tag, text = encode_flattened(value, marker.registry)
            ET.SubElement(parent, variant_tag).text = text
            continue

        if isinstance(marker, EmptyIsAbsent):
            ET.SubElement(parent, tag).text = encode_optional(value)
            continue

        # Skip None values for ordinary optional fields
        if value is None:
            continue

        field_element = ET.SubElement(parent, tag)
        _value_to_element(field_element, value)


def _value_to_element(element: ET.Element, value: Any) -> None:
    """Convert an ordinary field value to XML content within element."""
    if isinstance(value, BaseModel):
        # Nested record
        _model_to_element(element, value)

    elif isinstance(value, bool):
        # Boolean as lowercase string
        element.text = str(value).lower()

    else:
        element.text = str(value)
