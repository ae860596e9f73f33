"""Streaming renderer for decoded values.

Values are never materialized: each one is rendered to the sink as soon as
its bytes are read, so memory use is bounded by the nesting depth plus the
largest single string/binary/extension payload.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from ..config import DumpOptions
from ..exceptions import ResourceError
from ..reader import ByteReader
from .scalars import (
    format_float,
    format_hex,
    format_str,
    read_float32,
    read_float64,
    read_int,
    read_uint,
)
from .tags import TagClass, TagKind, classify


class TextSink(Protocol):
    """Anything with a file-like ``write(text)``."""

    def write(self, text: str, /) -> object: ...


class RoleKind(enum.Enum):
    """Position of a value inside its parent."""

    NONE = "none"
    ARRAY_INDEX = "array_index"
    MAP_KEY = "map_key"
    MAP_VALUE = "map_value"


@dataclass(frozen=True)
class Role:
    """Positional role of the value being rendered.

    The role only affects formatting: map values are not indented (they
    follow their key's ``": "`` on the same line), array elements get an
    ``"[i]: "`` prefix, and map keys end with ``": "`` instead of a newline.
    """

    kind: RoleKind
    index: Optional[int] = None

    @classmethod
    def none(cls) -> Role:
        return cls(RoleKind.NONE)

    @classmethod
    def array_index(cls, index: int) -> Role:
        if index < 0:
            raise ValueError(f"array index must be >= 0, got {index}")
        return cls(RoleKind.ARRAY_INDEX, index)

    @classmethod
    def map_key(cls) -> Role:
        return cls(RoleKind.MAP_KEY)

    @classmethod
    def map_value(cls) -> Role:
        return cls(RoleKind.MAP_VALUE)


class Renderer:
    """Decodes values from a reader and writes indented text to a sink.

    The renderer owns the formatting state: the current nesting depth and
    the rendering options. It can start at any depth, which makes a single
    nested value easy to render in isolation.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> renderer = Renderer(ByteReader(io.BytesIO(b"\\x92\\x01\\xc3")), out)
        >>> renderer.render_value(Role.none())
        True
        >>> print(out.getvalue(), end="")
        [
           [0]: 1
           [1]: true
        ]
    """

    def __init__(
        self,
        reader: ByteReader,
        sink: TextSink,
        options: Optional[DumpOptions] = None,
        depth: int = 0,
    ) -> None:
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        self.reader = reader
        self.sink = sink
        self.options = options or DumpOptions()
        self.depth = depth

        self._handlers: dict[TagKind, Callable[[int, TagClass], None]] = {
            TagKind.NIL: self._render_nil,
            TagKind.FALSE: self._render_bool,
            TagKind.TRUE: self._render_bool,
            TagKind.POSITIVE_FIXINT: self._render_fixint,
            TagKind.NEGATIVE_FIXINT: self._render_fixint,
            TagKind.UINT: self._render_uint,
            TagKind.INT: self._render_int,
            TagKind.FLOAT32: self._render_float,
            TagKind.FLOAT64: self._render_float,
            TagKind.FIXSTR: self._render_str,
            TagKind.STR: self._render_str,
            TagKind.BIN: self._render_bin,
            TagKind.FIXARRAY: self._render_array,
            TagKind.ARRAY: self._render_array,
            TagKind.FIXMAP: self._render_map,
            TagKind.MAP: self._render_map,
            TagKind.FIXEXT: self._render_ext,
            TagKind.EXT: self._render_ext,
        }

    def render_value(self, role: Role) -> bool:
        """Decode and render one value.

        Args:
            role: Position of the value inside its parent

        Returns:
            True if a value was rendered, False on clean end of input before
            a top-level value (only possible with ``Role.none()``)

        Raises:
            ReadError: If the input ends or fails inside the value
            UnknownTagError: If a tag byte is not recognized
            ResourceError: If the nesting limit is exceeded or a payload
                cannot be allocated
        """
        tag_offset = self.reader.offset
        data = self.reader.read_exact(1, boundary=role.kind is RoleKind.NONE)
        if not data:
            return False
        tag = data[0]

        self._start(role)
        tag_class = classify(tag, tag_offset)
        self._handlers[tag_class.kind](tag, tag_class)
        self._stop(role)
        return True

    # Layout

    def _write(self, text: str) -> None:
        self.sink.write(text)

    def _indent(self) -> None:
        if self.depth:
            self._write(self.options.indent_unit * self.depth)

    def _start(self, role: Role) -> None:
        if role.kind is not RoleKind.MAP_VALUE:
            self._indent()
        if role.kind is RoleKind.ARRAY_INDEX:
            self._write(f"[{role.index}]: ")

    def _stop(self, role: Role) -> None:
        if role.kind is RoleKind.MAP_KEY:
            self._write(": ")
        else:
            self._write("\n")

    def _read_length(self, tag: int, tag_class: TagClass) -> int:
        """Return the length of a fix kind from the tag, else read its prefix."""
        if tag_class.kind in (TagKind.FIXSTR, TagKind.FIXARRAY, TagKind.FIXMAP):
            return tag_class.fixed_length(tag)
        return read_uint(self.reader, tag_class.arg)

    # Scalars

    def _render_nil(self, tag: int, tag_class: TagClass) -> None:
        self._write("()")

    def _render_bool(self, tag: int, tag_class: TagClass) -> None:
        self._write("true" if tag_class.kind is TagKind.TRUE else "false")

    def _render_fixint(self, tag: int, tag_class: TagClass) -> None:
        # Negative fixint is the tag byte read as signed 8-bit
        value = tag - 0x100 if tag_class.kind is TagKind.NEGATIVE_FIXINT else tag
        self._write(str(value))

    def _render_uint(self, tag: int, tag_class: TagClass) -> None:
        self._write(str(read_uint(self.reader, tag_class.arg)))

    def _render_int(self, tag: int, tag_class: TagClass) -> None:
        self._write(str(read_int(self.reader, tag_class.arg)))

    def _render_float(self, tag: int, tag_class: TagClass) -> None:
        if tag_class.kind is TagKind.FLOAT32:
            value = read_float32(self.reader)
        else:
            value = read_float64(self.reader)
        self._write(format_float(value))

    # Raw payloads

    def _render_str(self, tag: int, tag_class: TagClass) -> None:
        payload = self.reader.read_exact(self._read_length(tag, tag_class))
        self._write(format_str(payload, escape=self.options.escape_strings))

    def _render_bin(self, tag: int, tag_class: TagClass) -> None:
        payload = self.reader.read_exact(self._read_length(tag, tag_class))
        self._write(format_hex(payload))

    def _render_ext(self, tag: int, tag_class: TagClass) -> None:
        if tag_class.kind is TagKind.FIXEXT:
            length = tag_class.arg
        else:
            length = read_uint(self.reader, tag_class.arg)
        type_code = read_uint(self.reader, 1)
        payload = self.reader.read_exact(length)
        self._write(f"Type{type_code}:{format_hex(payload)}")

    # Containers

    def _enter(self) -> None:
        if self.depth >= self.options.max_depth:
            raise ResourceError(
                f"Nesting depth exceeds {self.options.max_depth} "
                f"at offset {self.reader.offset}"
            )
        self.depth += 1

    def _render_array(self, tag: int, tag_class: TagClass) -> None:
        length = self._read_length(tag, tag_class)
        self._write("[\n")
        self._enter()
        try:
            for index in range(length):
                self.render_value(Role.array_index(index))
        finally:
            self.depth -= 1
        self._indent()
        self._write("]")

    def _render_map(self, tag: int, tag_class: TagClass) -> None:
        count = self._read_length(tag, tag_class)
        self._write("{\n")
        self._enter()
        try:
            for _ in range(count):
                self.render_value(Role.map_key())
                self.render_value(Role.map_value())
        finally:
            self.depth -= 1
        self._indent()
        self._write("}")
