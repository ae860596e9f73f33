"""Top-level dump loop."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Optional

from ..config import DumpOptions
from ..exceptions import ResourceError
from ..reader import ByteReader, ByteSource
from .renderer import Renderer, Role, TextSink


@dataclass
class DumpStats:
    """Summary of a completed dump.

    Attributes:
        values: Number of top-level values rendered
        bytes_read: Number of input bytes consumed
    """

    values: int = 0
    bytes_read: int = 0


def dump_stream(
    source: ByteSource, sink: TextSink, options: Optional[DumpOptions] = None
) -> DumpStats:
    """Render every top-level value in ``source`` to ``sink``.

    Values are rendered one after another until a clean end of input. The
    first error stops the loop; text already written for the value being
    decoded stays in the sink.

    Args:
        source: Byte source to decode (file object, BytesIO, stdin buffer)
        sink: Text sink receiving the rendered output
        options: Rendering options (defaults to DumpOptions())

    Returns:
        Statistics for the run

    Raises:
        ReadError: If the input is truncated or cannot be read
        UnknownTagError: If an unrecognized tag byte is found
        ResourceError: If the nesting limit is exceeded or the interpreter
            runs out of stack
    """
    reader = ByteReader(source)
    renderer = Renderer(reader, sink, options)
    stats = DumpStats()

    while not reader.eof:
        try:
            rendered = renderer.render_value(Role.none())
        except RecursionError as e:
            raise ResourceError(
                f"Nesting exceeds the interpreter stack at offset {reader.offset}"
            ) from e
        if not rendered:
            break
        stats.values += 1

    stats.bytes_read = reader.offset
    return stats


def dump_bytes(data: bytes, options: Optional[DumpOptions] = None) -> str:
    """Render an in-memory stream and return the text.

    Example:
        >>> print(dump_bytes(b"\\x81\\xa1a\\x01"), end="")
        {
           "a": 1
        }
    """
    sink = io.StringIO()
    dump_stream(io.BytesIO(data), sink, options)
    return sink.getvalue()
