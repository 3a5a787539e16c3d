# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Filesystem helpers: timestamps, exclusive creation and seed renames."""

import os
from datetime import datetime
from pathlib import Path
from typing import IO, Union

from jotter.core.errors import AlreadyExistsError, EntryIOError


def _local(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp).astimezone()


def file_times(target: Union[int, Path]) -> tuple[datetime, datetime]:
    """
    Get (created, modified) times of a file as aware local datetimes.

    Accepts an open file descriptor or a path. Creation time is the birth
    time where the platform records one, otherwise the modification time.

    Raises:
        EntryIOError: If the file can't be stat'ed
    """
    try:
        stat = os.fstat(target) if isinstance(target, int) else os.stat(target)
    except OSError as e:
        raise EntryIOError("read metadata of", Path(str(target)), e) from e

    created = getattr(stat, "st_birthtime", None) or stat.st_mtime
    return _local(created), _local(stat.st_mtime)


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as ISO-8601 with seconds and a +HH:MM offset."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.isoformat(timespec="seconds")


def create_exclusive(path: Path) -> IO[str]:
    """
    Create a new text file for writing, failing if the name is taken.

    Raises:
        AlreadyExistsError: If path already exists
        EntryIOError: On any other filesystem failure
    """
    try:
        return open(path, "x", encoding="utf-8", newline="\n")
    except FileExistsError as e:
        raise AlreadyExistsError(path) from e
    except OSError as e:
        raise EntryIOError("create", path, e) from e


def open_for_rewrite(path: Path) -> IO[str]:
    """Open an existing file for writing from scratch."""
    try:
        return open(path, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise EntryIOError("open", path, e) from e


def rename_seed(seed: Path, new_path: Path) -> Path:
    """
    Rename an empty seed file to its final name in the same directory.

    Refuses to replace a different file that already has the new name.

    Raises:
        AlreadyExistsError: If another file already owns new_path
        EntryIOError: If the rename fails
    """
    if new_path.exists():
        if new_path.samefile(seed):
            return new_path
        raise AlreadyExistsError(new_path)

    try:
        seed.rename(new_path)
    except OSError as e:
        raise EntryIOError(f"rename {seed} to", new_path, e) from e
    return new_path
