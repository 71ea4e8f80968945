"""XML serialization for records with flattened unions."""

from flatxml.serialization.xml_encoder import record_to_element, record_to_xml, write_record
from flatxml.serialization.xml_decoder import (
    element_to_mapping,
    mapping_to_record,
    read_record,
    xml_to_record,
)

__all__ = [
    "record_to_element",
    "record_to_xml",
    "write_record",
    "element_to_mapping",
    "mapping_to_record",
    "read_record",
    "xml_to_record",
]
