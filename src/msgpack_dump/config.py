"""Rendering options for msgpack_dump.

The options are a Pydantic model so that values coming from the command line
or from library callers are validated in one place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DumpOptions(BaseModel):
    """Options controlling how decoded values are rendered.

    Attributes:
        indent_width: Spaces per nesting level (default 3)
        escape_strings: Backslash-escape quotes, control characters and
            undecodable bytes inside strings instead of emitting them raw
        max_depth: Maximum array/map nesting depth before giving up

    Example:
        >>> options = DumpOptions(indent_width=2)
        >>> options.indent_unit
        '  '
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Forbid unknown options
        extra="forbid",
    )

    indent_width: int = Field(default=3, ge=0, le=16)
    escape_strings: bool = False
    # Each nesting level costs a few interpreter frames
    max_depth: int = Field(default=200, ge=1, le=300)

    @property
    def indent_unit(self) -> str:
        """Return the whitespace emitted once per nesting level."""
        return " " * self.indent_width
