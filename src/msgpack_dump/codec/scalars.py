"""Fixed-width scalar reads and scalar text formatting.

All multi-byte fields are big-endian (network byte order) regardless of
host byte order.
"""

from __future__ import annotations

import struct

from ..reader import ByteReader

INT_WIDTHS = (1, 2, 4, 8)


def read_uint(reader: ByteReader, width: int) -> int:
    """Read a big-endian unsigned integer.

    Args:
        reader: Reader to consume from
        width: Field width in bytes (1, 2, 4 or 8)

    Returns:
        Unsigned integer value

    Raises:
        ValueError: If width is not a supported field width
        ReadError: If the field is truncated
    """
    if width not in INT_WIDTHS:
        raise ValueError(f"width must be one of {INT_WIDTHS}, got {width}")
    return int.from_bytes(reader.read_exact(width), "big")


def read_int(reader: ByteReader, width: int) -> int:
    """Read a big-endian two's complement signed integer.

    The sign bit is bit ``8*width-1`` of the field actually read, so a
    1-byte 0xff is -1 and a 2-byte 0x00ff is 255.

    Args:
        reader: Reader to consume from
        width: Field width in bytes (1, 2, 4 or 8)

    Returns:
        Signed integer value
    """
    unsigned_value = read_uint(reader, width)
    num_bits = 8 * width

    sign_bit = 1 << (num_bits - 1)
    if unsigned_value & sign_bit:
        return unsigned_value - (1 << num_bits)
    return unsigned_value


def read_float32(reader: ByteReader) -> float:
    """Read a big-endian IEEE-754 single-precision float."""
    (value,) = struct.unpack(">f", reader.read_exact(4))
    return value


def read_float64(reader: ByteReader) -> float:
    """Read a big-endian IEEE-754 double-precision float."""
    (value,) = struct.unpack(">d", reader.read_exact(8))
    return value


def format_float(value: float) -> str:
    """Format a float in general notation (like C's ``%g``).

    Example:
        >>> format_float(1.5)
        '1.5'
        >>> format_float(1e20)
        '1e+20'
    """
    return format(value, "g")


def format_hex(data: bytes) -> str:
    """Format bytes as lowercase hex pairs separated by single spaces.

    Example:
        >>> format_hex(b"\\x01\\xab")
        '01 ab'
    """
    return " ".join(f"{byte:02x}" for byte in data)


def format_str(data: bytes, escape: bool = False) -> str:
    """Format string payload bytes as a double-quoted literal.

    Without ``escape`` the bytes are embedded as-is: bytes that are not valid
    UTF-8 become surrogate escapes, which a sink opened with
    ``errors="surrogateescape"`` writes back out unchanged.

    Args:
        data: Raw string payload
        escape: Backslash-escape quotes, backslashes, control characters and
            undecodable bytes

    Returns:
        Quoted string literal
    """
    if not escape:
        return '"' + data.decode("utf-8", "surrogateescape") + '"'

    parts = []
    for char in data.decode("utf-8", "surrogateescape"):
        code = ord(char)
        if char in ('"', "\\"):
            parts.append("\\" + char)
        elif char == "\n":
            parts.append("\\n")
        elif char == "\t":
            parts.append("\\t")
        elif char == "\r":
            parts.append("\\r")
        elif 0xDC80 <= code <= 0xDCFF:
            # Undecodable byte carried as a lone surrogate
            parts.append(f"\\x{code - 0xDC00:02x}")
        elif code < 0x20 or code == 0x7F:
            parts.append(f"\\x{code:02x}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'
