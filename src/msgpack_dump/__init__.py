"""msgpack_dump: MessagePack Stream Inspector

A diagnostic tool that decodes a stream of MessagePack values and renders
each one as indented, human-readable text. Values are rendered as they are
read, so arbitrarily long streams are handled in memory proportional to the
nesting depth.

Key Features:
- Every MessagePack tag: ints, floats, strings, binary, arrays, maps, extensions
- Streaming rendering (no in-memory value tree)
- Exact-read semantics: truncated input is always an error
- Pydantic-validated rendering options

Quick Start:
    >>> from msgpack_dump import dump_bytes
    >>> print(dump_bytes(b"\\x82\\xa1a\\x01\\xa1b\\x92\\x02\\x03"), end="")
    {
       "a": 1
       "b": [
          [0]: 2
          [1]: 3
       ]
    }
"""

from __future__ import annotations

from .codec import DumpStats, Renderer, Role, RoleKind, classify, dump_bytes, dump_stream
from .config import DumpOptions
from .exceptions import MsgpackDumpError, ReadError, ResourceError, UnknownTagError
from .reader import ByteReader, ByteSource

__version__ = "0.1.0"

__all__ = [
    # Core API
    "dump_stream",
    "dump_bytes",
    "DumpStats",
    "DumpOptions",
    # Building blocks
    "ByteReader",
    "ByteSource",
    "Renderer",
    "Role",
    "RoleKind",
    "classify",
    # Exceptions
    "MsgpackDumpError",
    "ReadError",
    "UnknownTagError",
    "ResourceError",
    # Version
    "__version__",
]
