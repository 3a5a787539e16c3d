# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Monthly diary entries.

A diary file is YYYYMM.md with a frontmatter block followed by one
section per day of that month. The month is chosen by the rollover rule
in jotter.entries.rollover.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

from jotter.core.errors import AlreadyExistsError, EntryIOError
from jotter.core.options import EntryOptions
from jotter.entries.render import render_diary
from jotter.entries.rollover import (
    MonthKey,
    choose_month,
    diary_file_name,
    find_latest_month,
    next_month,
)
from jotter.logging import get_logger
from jotter.utils.fs import create_exclusive, file_times, open_for_rewrite, rename_seed


def _today() -> date:
    return datetime.now().date()


def _write_diary(handle, path: Path, key: MonthKey) -> None:
    """Fill an open diary file and close it."""
    try:
        with handle:
            created_at, updated_at = file_times(handle.fileno())
            handle.write(render_diary(key, created_at, updated_at))
    except OSError as e:
        raise EntryIOError("write", path, e) from e


def create_diary_from_seed(options: EntryOptions, today: Optional[date] = None) -> Path:
    """
    Turn an empty seed file into the next monthly diary.

    The seed is renamed to YYYYMM.md in its own directory, then filled.

    Args:
        options: Options resolved with EntryOptions.for_file
        today: Override for the current date

    Returns:
        Path of the diary file
    """
    log = get_logger("entries.diary")
    today = today or _today()

    latest = find_latest_month(options.cwd, exclude=options.target)
    key = choose_month(latest, today)
    log.debug(f"Latest diary: {latest}, today: {today}, chosen: {key}")

    new_path = rename_seed(options.target, options.cwd / diary_file_name(key))
    _write_diary(open_for_rewrite(new_path), new_path, key)

    log.debug(f"Wrote diary {new_path}")
    return new_path


def create_diary_in_directory(options: EntryOptions, today: Optional[date] = None) -> Path:
    """
    Create the next monthly diary inside a directory.

    If the chosen month's file somehow exists already, the following month
    is tried once before giving up.

    Args:
        options: Options resolved with EntryOptions.for_directory
        today: Override for the current date

    Returns:
        Path of the diary file

    Raises:
        AlreadyExistsError: If both the chosen and the following month exist
    """
    log = get_logger("entries.diary")
    today = today or _today()

    latest = find_latest_month(options.cwd)
    key = choose_month(latest, today)
    log.debug(f"Latest diary: {latest}, today: {today}, chosen: {key}")

    new_path = options.cwd / diary_file_name(key)
    try:
        handle = create_exclusive(new_path)
    except AlreadyExistsError:
        key = next_month(key)
        log.warning(f"{new_path.name} already exists, trying {diary_file_name(key)}")
        new_path = options.cwd / diary_file_name(key)
        handle = create_exclusive(new_path)

    _write_diary(handle, new_path, key)

    log.debug(f"Wrote diary {new_path}")
    return new_path
