#!/usr/bin/env python3
"""Basic usage example for msgpack_dump.

This example demonstrates:
1. Rendering an in-memory stream
2. Changing the rendering options
3. Rendering to an arbitrary sink and reading the statistics
4. Handling a truncated stream
"""

from __future__ import annotations

import io
import sys

from msgpack_dump import DumpOptions, MsgpackDumpError, dump_bytes, dump_stream

# {"vehicle": 42, "depth_cm": 2500, "flags": [true, false], "raw": bin 01 02}
STATUS = (
    b"\x84"
    b"\xa7vehicle\x2a"
    b"\xa8depth_cm\xcd\x09\xc4"
    b"\xa5flags\x92\xc3\xc2"
    b"\xa3raw\xc4\x02\x01\x02"
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("msgpack_dump Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Default rendering:")
    print(dump_bytes(STATUS))

    print("2. Two-space indentation:")
    print(dump_bytes(STATUS, DumpOptions(indent_width=2)))

    print("3. Two records to stdout:")
    stats = dump_stream(io.BytesIO(STATUS * 2), sys.stdout)
    print(f"   {stats.values} values, {stats.bytes_read} bytes")
    print()

    print("4. Truncated stream:")
    try:
        dump_bytes(STATUS[:-1])
    except MsgpackDumpError as e:
        print(f"   Error: {e}")


if __name__ == "__main__":
    main()
