# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Diary rollover - which month should the next diary file cover?

Diary files are named YYYYMM.md. The next file continues from the latest
existing one, unless that one is already in the past, in which case we
jump straight to the current month rather than back-filling the gap.
"""

import re
from datetime import MAXYEAR, date
from pathlib import Path
from typing import Optional

from jotter.core.errors import EntryIOError, InvalidInputError

MonthKey = tuple[int, int]

DIARY_NAME_PATTERN = re.compile(r"^(\d{4})(\d{2})\.md$")


def parse_diary_name(name: str) -> Optional[MonthKey]:
    """
    Parse a diary file name into a (year, month) key.

    Returns None if the name isn't YYYYMM.md or doesn't describe a real month.
    """
    match = DIARY_NAME_PATTERN.match(name)
    if not match:
        return None

    year, month = int(match.group(1)), int(match.group(2))
    try:
        date(year, month, 1)
    except ValueError:
        return None
    return year, month


def diary_file_name(key: MonthKey) -> str:
    """Build the YYYYMM.md file name for a month."""
    year, month = key
    return f"{year:04d}{month:02d}.md"


def find_latest_month(directory: Path, exclude: Optional[Path] = None) -> Optional[MonthKey]:
    """
    Find the latest month that already has a diary file in directory.

    Args:
        directory: Directory to scan (not recursive)
        exclude: A path to ignore, e.g. the seed file about to be renamed

    Returns:
        The maximum (year, month) found, or None if there's no diary file yet

    Raises:
        EntryIOError: If the directory can't be listed
    """
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise EntryIOError("read directory", directory, e) from e

    keys = []
    for entry in entries:
        if exclude is not None and entry.name == exclude.name:
            continue
        key = parse_diary_name(entry.name)
        if key is None:
            continue
        # Skip directories and anything else that isn't a regular file
        if not entry.is_file():
            continue
        keys.append(key)

    return max(keys, default=None)


def next_month(key: MonthKey) -> MonthKey:
    """
    The month after key, rolling December over into the next year.

    Raises:
        InvalidInputError: If the next month would need a five-digit year
    """
    year, month = key
    if month == 12:
        if year >= MAXYEAR:
            raise InvalidInputError(f"no month after {diary_file_name(key)}: year {year + 1} is out of range")
        return year + 1, 1
    return year, month + 1


def choose_month(latest: Optional[MonthKey], today: date) -> MonthKey:
    """
    Pick the month the next diary file should cover.

    - No diary yet: the current month.
    - Latest diary is before the current month: the current month.
    - Otherwise: the month right after the latest diary.
    """
    current = (today.year, today.month)
    if latest is None or latest < current:
        return current
    return next_month(latest)
