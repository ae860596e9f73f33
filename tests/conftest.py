"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io

import pytest

from msgpack_dump import ByteReader, Renderer


@pytest.fixture
def nested_map_payload() -> bytes:
    """Encoded {"a": 1, "b": [2, 3]}."""
    return b"\x82\xa1a\x01\xa1b\x92\x02\x03"


@pytest.fixture
def nested_map_text() -> str:
    """Rendering of nested_map_payload with the default options."""
    return '{\n   "a": 1\n   "b": [\n      [0]: 2\n      [1]: 3\n   ]\n}\n'


@pytest.fixture
def make_renderer():
    """Factory for a Renderer over in-memory bytes and a StringIO sink."""

    def _make(data: bytes, **kwargs):
        sink = io.StringIO()
        renderer = Renderer(ByteReader(io.BytesIO(data)), sink, **kwargs)
        return renderer, sink

    return _make
