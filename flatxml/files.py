"""Read and write records as XML files."""

import io
import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel

from flatxml.serialization import write_record, xml_to_record

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def read_whole_file(path: str | Path) -> bytes:
    """Return the full contents of a file.

    Raises:
        OSError: If the file is missing or unreadable
    """
    path = Path(path)
    data = path.read_bytes()
    logger.info("Read %d bytes from %s", len(data), path)
    return data


def write_whole_file(path: str | Path, data: bytes) -> None:
    """Create or truncate a file and write data to it.

    Raises:
        OSError: If the file cannot be created or written
    """
    path = Path(path)
    path.write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), path)


def to_xml_file(path: str | Path, record: BaseModel, root_tag: str | None = None) -> None:
    """Write a record to an XML file.

    Example:
        >>> to_xml_file("export.xml", DeviceRecord(name="MyDevice", control=Power(3.5)))
    """
    buffer = io.BytesIO()
    write_record(buffer, record, root_tag)
    write_whole_file(path, buffer.getvalue())


def from_xml_file(path: str | Path, record_class: type[T]) -> T:
    """Read a record from an XML file.

    Raises:
        OSError: If the file cannot be read
        DecodeError: If its contents don't decode to record_class
    """
    return xml_to_record(read_whole_file(path), record_class)
