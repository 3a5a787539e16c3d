# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
init command - Fill an existing, empty file in as a new entry.

The file is renamed in place (YYYYMM.md for diaries, <ulid>.md for notes)
and its frontmatter written. Handy from an editor that has just created an
untitled placeholder.
"""

import argparse
from pathlib import Path

from jotter.core.options import EntryOptions
from jotter.core.types import EntryKind
from jotter.entries import create_diary_from_seed, create_note_from_seed
from jotter.logging import log_command_end, log_command_start


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the init command."""
    parser = argparse.ArgumentParser(
        prog="jotter init",
        description="Initialize <file> to a new entry.",
        epilog="The file must exist and be empty. Its new path is printed on success.",
    )
    parser.add_argument(
        "file",
        metavar="FILE",
        type=Path,
        help="File to be a new entry",
    )
    parser.add_argument(
        "--diary",
        action="store_true",
        help="Use a diary format",
    )
    parser.add_argument(
        "--note",
        action="store_true",
        help="Use a note format [default]",
    )
    return parser


def run(args: list[str]) -> int:
    """
    Run the init command.

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

    log_command_start("init", file=str(parsed.file), diary=parsed.diary, note=parsed.note)

    opts = EntryOptions.for_file(parsed.file, diary=parsed.diary, note=parsed.note)
    if opts.kind == EntryKind.DIARY:
        new_path = create_diary_from_seed(opts)
    else:
        new_path = create_note_from_seed(opts)

    print(new_path)
    log_command_end("init", path=str(new_path))
    return 0
