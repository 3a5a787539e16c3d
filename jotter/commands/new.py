# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
new command - Create a new entry inside a directory.

Diaries continue from the latest YYYYMM.md in the directory; notes get a
fresh ULID (or UUIDv7 with --uuid) as their file name.
"""

import argparse
from pathlib import Path

from jotter.core.options import EntryOptions
from jotter.core.types import EntryKind
from jotter.entries import create_diary_in_directory, create_note_in_directory
from jotter.logging import log_command_end, log_command_start


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the new command."""
    parser = argparse.ArgumentParser(
        prog="jotter new",
        description="Create a new entry in <path>.",
        epilog="The directory is created if it doesn't exist yet.",
    )
    parser.add_argument(
        "path",
        metavar="PATH",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory to create a new entry in (default: current directory)",
    )
    parser.add_argument(
        "--diary",
        action="store_true",
        help="Use a diary format",
    )
    parser.add_argument(
        "--ulid",
        "--note",
        dest="ulid",
        action="store_true",
        help="Use a note format named with a ULID [default]",
    )
    parser.add_argument(
        "--uuid",
        action="store_true",
        help="Use a note format named with a UUIDv7",
    )
    return parser


def run(args: list[str]) -> int:
    """
    Run the new command.

    Args:
        args: Command line arguments

    Returns:
        Exit code (0 for success)

    Raises:
        JotterError: On invalid input or filesystem failure
    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return int(e.code or 0)

    log_command_start("new", path=str(parsed.path), diary=parsed.diary, ulid=parsed.ulid, uuid=parsed.uuid)

    opts = EntryOptions.for_directory(parsed.path, diary=parsed.diary, note=parsed.ulid, uuid=parsed.uuid)
    if opts.kind == EntryKind.DIARY:
        new_path = create_diary_in_directory(opts)
    else:
        new_path = create_note_in_directory(opts)

    print(new_path)
    log_command_end("new", path=str(new_path))
    return 0
