"""Exception hierarchy for msgpack_dump.

All exceptions inherit from MsgpackDumpError for easy catching of any
msgpack_dump-specific error. Every error is fatal for the dump loop: the
first one raised stops the whole run.
"""

from __future__ import annotations


class MsgpackDumpError(Exception):
    """Base exception for all msgpack_dump errors."""

    pass


class ReadError(MsgpackDumpError):
    """Raised when the byte source cannot deliver the requested bytes.

    Examples:
        - Truncated stream (declared length runs past end of input)
        - End of input in the middle of a value
        - Underlying I/O failure

    Attributes:
        requested: Number of bytes the decoder asked for
        available: Number of bytes actually obtained
        offset: Stream offset at which the read started
    """

    def __init__(self, requested: int, available: int, offset: int, reason: str = "") -> None:
        self.requested = requested
        self.available = available
        self.offset = offset
        message = (
            f"Cannot read {requested} bytes at offset {offset}: "
            f"only {available} available"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownTagError(MsgpackDumpError):
    """Raised when a leading byte matches no known tag class."""

    def __init__(self, tag: int, offset: int) -> None:
        self.tag = tag
        self.offset = offset
        super().__init__(f"Bad tag {tag:02x} at offset {offset}")


class ResourceError(MsgpackDumpError):
    """Raised when decoding needs more resources than are available.

    Examples:
        - Payload buffer cannot be allocated
        - Nesting depth exceeds the configured limit
    """

    pass
