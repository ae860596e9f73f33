"""Streaming decoder and renderer for the MessagePack format.

This module classifies tag bytes, reads scalar fields and renders every
value as indented text without building an in-memory tree.
"""

from __future__ import annotations

from .dump import DumpStats, dump_bytes, dump_stream
from .renderer import Renderer, Role, RoleKind, TextSink
from .tags import TAG_TABLE, TagClass, TagKind, classify

__all__ = [
    "dump_stream",
    "dump_bytes",
    "DumpStats",
    "Renderer",
    "Role",
    "RoleKind",
    "TextSink",
    "TAG_TABLE",
    "TagClass",
    "TagKind",
    "classify",
]
