"""Tag byte classification.

The leading byte of every value selects its kind and how its length or
payload follows. The byte space is partitioned by bit masks; the table below
is evaluated top to bottom and the first match wins.

Partition (high bit first):

    0x00-0x7f  positive fixint       0x80-0x8f  fixmap
    0x90-0x9f  fixarray              0xa0-0xbf  fixstr
    0xc0       nil                   0xc1       (unassigned)
    0xc2/0xc3  false/true            0xc4-0xc6  bin 8/16/32
    0xc7-0xc9  ext 8/16/32           0xca/0xcb  float 32/64
    0xcc-0xcf  uint 8/16/32/64       0xd0-0xd3  int 8/16/32/64
    0xd4-0xd8  fixext 1/2/4/8/16     0xd9-0xdb  str 8/16/32
    0xdc/0xdd  array 16/32           0xde/0xdf  map 16/32
    0xe0-0xff  negative fixint

The mask classes never overlap each other or the exact tags: ``0xe0``
(negative fixint) and ``0xa0`` (fixstr) are both 3-bit classes, and every
exact tag lives in 0xc0-0xdf, which no mask class covers.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..exceptions import UnknownTagError


class TagKind(enum.Enum):
    """Value kinds selected by a tag byte."""

    NIL = "nil"
    FALSE = "false"
    TRUE = "true"
    POSITIVE_FIXINT = "positive_fixint"
    NEGATIVE_FIXINT = "negative_fixint"
    UINT = "uint"
    INT = "int"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    FIXSTR = "fixstr"
    STR = "str"
    BIN = "bin"
    FIXARRAY = "fixarray"
    ARRAY = "array"
    FIXMAP = "fixmap"
    MAP = "map"
    FIXEXT = "fixext"
    EXT = "ext"


@dataclass(frozen=True)
class TagClass:
    """One row of the tag table.

    Attributes:
        mask: Bits of the tag that identify the class
        value: Expected value of ``tag & mask``
        kind: Value kind of the class
        arg: Kind-specific parameter: field width for uint/int, length-prefix
            width for str/bin/array/map/ext, payload length for fixext,
            unused (0) otherwise
    """

    mask: int
    value: int
    kind: TagKind
    arg: int = 0

    def matches(self, tag: int) -> bool:
        """Return True if ``tag`` belongs to this class."""
        return tag & self.mask == self.value

    def fixed_length(self, tag: int) -> int:
        """Return the length stored in the spare low bits of ``tag``."""
        return tag & ~self.mask & 0xFF


def _exact(tag: int, kind: TagKind, arg: int = 0) -> TagClass:
    return TagClass(0xFF, tag, kind, arg)


TAG_TABLE: tuple[TagClass, ...] = (
    # Exact single-byte tags first
    _exact(0xC0, TagKind.NIL),
    _exact(0xC2, TagKind.FALSE),
    _exact(0xC3, TagKind.TRUE),
    # Mask classes
    TagClass(0x80, 0x00, TagKind.POSITIVE_FIXINT),
    TagClass(0xE0, 0xE0, TagKind.NEGATIVE_FIXINT),
    TagClass(0xE0, 0xA0, TagKind.FIXSTR),
    TagClass(0xF0, 0x90, TagKind.FIXARRAY),
    TagClass(0xF0, 0x80, TagKind.FIXMAP),
    # Remaining exact tags
    _exact(0xCC, TagKind.UINT, 1),
    _exact(0xCD, TagKind.UINT, 2),
    _exact(0xCE, TagKind.UINT, 4),
    _exact(0xCF, TagKind.UINT, 8),
    _exact(0xD0, TagKind.INT, 1),
    _exact(0xD1, TagKind.INT, 2),
    _exact(0xD2, TagKind.INT, 4),
    _exact(0xD3, TagKind.INT, 8),
    _exact(0xCA, TagKind.FLOAT32),
    _exact(0xCB, TagKind.FLOAT64),
    _exact(0xD9, TagKind.STR, 1),
    _exact(0xDA, TagKind.STR, 2),
    _exact(0xDB, TagKind.STR, 4),
    _exact(0xC4, TagKind.BIN, 1),
    _exact(0xC5, TagKind.BIN, 2),
    _exact(0xC6, TagKind.BIN, 4),
    _exact(0xDC, TagKind.ARRAY, 2),
    _exact(0xDD, TagKind.ARRAY, 4),
    _exact(0xDE, TagKind.MAP, 2),
    _exact(0xDF, TagKind.MAP, 4),
    _exact(0xD4, TagKind.FIXEXT, 1),
    _exact(0xD5, TagKind.FIXEXT, 2),
    _exact(0xD6, TagKind.FIXEXT, 4),
    _exact(0xD7, TagKind.FIXEXT, 8),
    _exact(0xD8, TagKind.FIXEXT, 16),
    _exact(0xC7, TagKind.EXT, 1),
    _exact(0xC8, TagKind.EXT, 2),
    _exact(0xC9, TagKind.EXT, 4),
)


def classify(tag: int, offset: int = 0) -> TagClass:
    """Find the tag class of a leading byte.

    Args:
        tag: Leading byte (0-255)
        offset: Stream offset of the byte, for the error message

    Returns:
        The first matching TagClass in TAG_TABLE

    Raises:
        UnknownTagError: If no class matches (only 0xc1)

    Example:
        >>> classify(0x93).kind
        <TagKind.FIXARRAY: 'fixarray'>
        >>> classify(0x93).fixed_length(0x93)
        3
    """
    for tag_class in TAG_TABLE:
        if tag_class.matches(tag):
            return tag_class
    raise UnknownTagError(tag, offset)
