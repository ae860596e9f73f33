"""Command-line interface for msgpack_dump."""
