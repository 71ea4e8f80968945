"""Demonstration: export a device record to XML, import it back, compare."""

import argparse
import logging
import sys
from pathlib import Path

from flatxml.config import get_settings
from flatxml.exceptions import FlatXmlError
from flatxml.files import from_xml_file, to_xml_file
from flatxml.records import DeviceRecord, Voltage


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="flatxml", description=__doc__)
    parser.add_argument("path", nargs="?", type=Path, default=Path("test.xml"),
                        help="file to write and read back (default: test.xml)")
    ns = parser.parse_args(argv)

    logging.basicConfig(level=get_settings().log_level.upper())

    original = DeviceRecord(name="OtherDeviceTest", control=Voltage(2.0))
    print(f"[Original] {original.name}, {original.control!r}")

    try:
        to_xml_file(ns.path, original)
        print(f"[Export] Wrote {ns.path}")
        restored = from_xml_file(ns.path, DeviceRecord)
        print(f"[Import] Read {ns.path}")
    except (OSError, FlatXmlError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if restored != original:
        print(f"[Import] Mismatch: {restored!r}", file=sys.stderr)
        return 1

    print("[Import] Imported record matches original.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
