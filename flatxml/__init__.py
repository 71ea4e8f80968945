"""flatxml - XML round trips for records with element-name-tagged unions.

A union field is written as one element named after its active variant,
alongside the record's other fields:

    <DeviceTag>
      <Name>MyDevice</Name>
      <Power>3.5</Power>
    </DeviceTag>
"""

from flatxml._version import __version__
from flatxml.config import FlatXmlSettings, get_settings
from flatxml.exceptions import (
    FlatXmlError,
    RegistryError,
    DecodeError,
    MissingVariantTag,
    UnexpectedShape,
    InvalidNumber,
    StructuralError,
)
from flatxml.values import F32, parse_leaf, format_leaf
from flatxml.types import Variant, PlainText, WrappedText, Flattened, EmptyIsAbsent
from flatxml.registry import VariantRegistry
from flatxml.unions import decode_flattened, encode_flattened, decode_optional, encode_optional
from flatxml.records import (
    Voltage,
    Power,
    Dollars,
    Euros,
    ControlKind,
    PriceKind,
    CONTROL_TAGS,
    PRICE_TAGS,
    DeviceRecord,
    ProductRecord,
)
from flatxml.serialization import record_to_xml, xml_to_record, write_record, read_record
from flatxml.files import to_xml_file, from_xml_file

__all__ = [
    "__version__",
    "FlatXmlSettings",
    "get_settings",
    "FlatXmlError",
    "RegistryError",
    "DecodeError",
    "MissingVariantTag",
    "UnexpectedShape",
    "InvalidNumber",
    "StructuralError",
    "F32",
    "parse_leaf",
    "format_leaf",
    "Variant",
    "PlainText",
    "WrappedText",
    "Flattened",
    "EmptyIsAbsent",
    "VariantRegistry",
    "decode_flattened",
    "encode_flattened",
    "decode_optional",
    "encode_optional",
    "Voltage",
    "Power",
    "Dollars",
    "Euros",
    "ControlKind",
    "PriceKind",
    "CONTROL_TAGS",
    "PRICE_TAGS",
    "DeviceRecord",
    "ProductRecord",
    "record_to_xml",
    "xml_to_record",
    "write_record",
    "read_record",
    "to_xml_file",
    "from_xml_file",
]
