"""Unit tests for scalar reads and formatting."""

from __future__ import annotations

import io
import math
import struct

import pytest

from msgpack_dump import ByteReader, ReadError
from msgpack_dump.codec.scalars import (
    format_float,
    format_hex,
    format_str,
    read_float32,
    read_float64,
    read_int,
    read_uint,
)


def _reader(data: bytes) -> ByteReader:
    return ByteReader(io.BytesIO(data))


class TestIntegers:
    """Test big-endian integer reads."""

    def test_read_uint(self) -> None:
        """Test unsigned reads of every width."""
        assert read_uint(_reader(b"\xff"), 1) == 255
        assert read_uint(_reader(b"\x01\x00"), 2) == 256
        assert read_uint(_reader(b"\x00\x01\x00\x00"), 4) == 65536
        assert read_uint(_reader(b"\xff" * 8), 8) == 2**64 - 1

    def test_read_int_sign_extension(self) -> None:
        """Test the sign bit is taken from the field width."""
        assert read_int(_reader(b"\xff"), 1) == -1
        assert read_int(_reader(b"\x80"), 1) == -128
        assert read_int(_reader(b"\x00\xff"), 2) == 255
        assert read_int(_reader(b"\xff\x7f"), 2) == -129
        assert read_int(_reader(b"\xff\xff\xff\xfe"), 4) == -2
        assert read_int(_reader(b"\x80" + b"\x00" * 7), 8) == -(2**63)
        assert read_int(_reader(b"\x7f" + b"\xff" * 7), 8) == 2**63 - 1

    def test_invalid_width(self) -> None:
        """Test unsupported widths are rejected."""
        with pytest.raises(ValueError, match="width"):
            read_uint(_reader(b"\x00\x00\x00"), 3)

    def test_truncated(self) -> None:
        """Test a short field is a read error."""
        with pytest.raises(ReadError):
            read_uint(_reader(b"\x00"), 2)


class TestFloats:
    """Test IEEE-754 reads and formatting."""

    def test_read_float32(self) -> None:
        """Test single precision."""
        assert read_float32(_reader(struct.pack(">f", 1.5))) == 1.5

    def test_read_float64(self) -> None:
        """Test double precision."""
        assert read_float64(_reader(struct.pack(">d", -0.25))) == -0.25

    def test_format_float(self) -> None:
        """Test general notation."""
        assert format_float(1.5) == "1.5"
        assert format_float(0.1) == "0.1"
        assert format_float(100000.0) == "100000"
        assert format_float(1234567.0) == "1.23457e+06"
        assert format_float(1e20) == "1e+20"
        assert format_float(math.inf) == "inf"
        assert format_float(-math.inf) == "-inf"
        assert format_float(math.nan) == "nan"


class TestPayloadFormatting:
    """Test binary and string formatting."""

    def test_format_hex(self) -> None:
        """Test lowercase space-separated pairs."""
        assert format_hex(b"\x00\xff\x10") == "00 ff 10"
        assert format_hex(b"\xab") == "ab"
        assert format_hex(b"") == ""

    def test_format_str_raw(self) -> None:
        """Test raw strings keep their bytes."""
        assert format_str(b"abc") == '"abc"'
        assert format_str(b"") == '""'
        assert format_str(b"a\nb") == '"a\nb"'
        assert format_str("é".encode()) == '"é"'

    def test_format_str_invalid_utf8(self) -> None:
        """Test undecodable bytes survive as surrogate escapes."""
        text = format_str(b"\xff\xfe")

        assert text == '"\udcff\udcfe"'
        assert text.encode("utf-8", "surrogateescape") == b'"\xff\xfe"'

    def test_format_str_escaped(self) -> None:
        """Test escaping of quotes, control characters and bad bytes."""
        assert format_str(b'a"b\\\n\x01\xff', escape=True) == r'"a\"b\\\n\x01\xff"'
        assert format_str("é".encode(), escape=True) == '"é"'
