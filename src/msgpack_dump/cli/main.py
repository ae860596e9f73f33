"""Main CLI entry point for msgpack_dump."""

from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path
from typing import Optional, TextIO

from pydantic import ValidationError

from .. import __version__
from ..codec import dump_stream
from ..config import DumpOptions
from ..exceptions import MsgpackDumpError
from ..reader import ByteSource


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the msgpack-dump command."""
    parser = argparse.ArgumentParser(
        prog="msgpack-dump",
        description="msgpack-dump: MessagePack Stream Inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  msgpack-dump data.msgpack              Dump every value in a file
  cat data.msgpack | msgpack-dump        Dump values from standard input
  msgpack-dump --indent 2 --escape FILE  Two-space indent, escaped strings
        """,
    )

    parser.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        help="Input file (default: standard input)",
    )

    parser.add_argument(
        "--indent",
        metavar="N",
        type=int,
        default=3,
        help="Spaces per nesting level (default: 3)",
    )

    parser.add_argument(
        "--escape",
        action="store_true",
        help="Escape control characters and undecodable bytes in strings",
    )

    parser.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        default=200,
        help="Maximum array/map nesting depth, 1-300 (default: 200)",
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print value and byte counts to stderr when done",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"msgpack-dump {__version__}",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the msgpack-dump CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = DumpOptions(
            indent_width=args.indent,
            escape_strings=args.escape,
            max_depth=args.max_depth,
        )
    except ValidationError as e:
        print(f"Error: Invalid options: {e}", file=sys.stderr)
        return 1

    if args.file is None:
        return _run(sys.stdin.buffer, options, args.stats)

    file_path = Path(args.file)
    try:
        source = file_path.open("rb")
    except OSError as e:
        print(f"Error: Cannot open input file '{file_path}': {e.strerror or e}", file=sys.stderr)
        return 1

    with source:
        return _run(source, options, args.stats)


def _stdout_sink() -> TextIO:
    """Return a UTF-8 view of stdout that passes raw string bytes through.

    Undecodable string bytes arrive as surrogate escapes and are written back
    out unchanged. sys.stdout itself is left untouched.
    """
    sys.stdout.flush()
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        return sys.stdout
    return io.TextIOWrapper(buffer, encoding="utf-8", errors="surrogateescape")


def _release_sink(sink: TextIO) -> None:
    sink.flush()
    if sink is not sys.stdout:
        # Keep stdout's buffer open
        sink.detach()


def _run(source: ByteSource, options: DumpOptions, show_stats: bool) -> int:
    sink = _stdout_sink()
    try:
        try:
            stats = dump_stream(source, sink, options)
        finally:
            _release_sink(sink)
    except MsgpackDumpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if show_stats:
        print(f"{stats.values} values, {stats.bytes_read} bytes", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
