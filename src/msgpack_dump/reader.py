"""Exact-count byte reader over an arbitrary byte source.

The reader is the only place that touches the input. It distinguishes a
clean end of input at a value boundary from a stream that ends part way
through a value, which is always an error.
"""

from __future__ import annotations

from typing import Protocol

from .exceptions import ReadError, ResourceError

# Upper bound on a single read() call; declared lengths may lie
CHUNK_SIZE = 64 * 1024


class ByteSource(Protocol):
    """Anything with a file-like ``read(n)`` returning bytes."""

    def read(self, size: int = -1, /) -> bytes: ...


class ByteReader:
    """Reads exact byte counts from a ByteSource.

    Attributes:
        offset: Number of bytes consumed so far (diagnostics only)
        eof: True once a clean end of input was seen at a value boundary.
            Never cleared; no reads are attempted once it is set.

    Example:
        >>> import io
        >>> reader = ByteReader(io.BytesIO(b"\\x01\\x02"))
        >>> reader.read_exact(2)
        b'\\x01\\x02'
        >>> reader.read_exact(1, boundary=True)
        b''
        >>> reader.eof
        True
    """

    def __init__(self, source: ByteSource) -> None:
        self._source = source
        self.offset = 0
        self.eof = False

    def read_exact(self, size: int, *, boundary: bool = False) -> bytes:
        """Read exactly ``size`` bytes.

        Args:
            size: Number of bytes to read (>= 0)
            boundary: True when this read starts a new top-level value, the
                only place where running out of input is not an error

        Returns:
            The bytes read, or ``b""`` on clean end of input at a boundary

        Raises:
            ReadError: If fewer than ``size`` bytes are available
            ResourceError: If the buffer cannot be allocated
        """
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        if size == 0:
            return b""

        start = self.offset
        if self.eof:
            raise ReadError(size, 0, start, "end of input already reached")

        buffer = bytearray()
        try:
            while len(buffer) < size:
                chunk = self._source.read(min(size - len(buffer), CHUNK_SIZE))
                if not chunk:
                    break
                buffer += chunk
                self.offset += len(chunk)
        except MemoryError as e:
            raise ResourceError(f"Cannot allocate {size} bytes at offset {start}") from e
        except OSError as e:
            raise ReadError(size, len(buffer), start, e.strerror or str(e)) from e

        if len(buffer) == size:
            return bytes(buffer)

        if not buffer:
            self.eof = True
            if boundary:
                return b""
        raise ReadError(size, len(buffer), start, "truncated stream")
