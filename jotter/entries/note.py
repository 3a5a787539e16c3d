# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Single note entries named by a time-ordered identifier."""

from pathlib import Path

from jotter.core.errors import EntryIOError
from jotter.core.options import EntryOptions
from jotter.entries.identifiers import get_generator
from jotter.entries.render import render_note
from jotter.logging import get_logger
from jotter.utils.fs import create_exclusive, file_times, open_for_rewrite, rename_seed


def note_file_name(identifier: str) -> str:
    """Build the <identifier>.md file name for a note."""
    return f"{identifier}.md"


def _write_note(handle, path: Path) -> None:
    """Fill an open note file and close it."""
    try:
        with handle:
            created_at, updated_at = file_times(handle.fileno())
            handle.write(render_note(created_at, updated_at))
    except OSError as e:
        raise EntryIOError("write", path, e) from e


def create_note_from_seed(options: EntryOptions) -> Path:
    """
    Turn an empty seed file into a note.

    The identifier comes from the seed's own creation time, so running
    again against the same seed yields the same timestamp prefix.
    """
    log = get_logger("entries.note")

    seed_created, _ = file_times(options.target)
    identifier = get_generator(options.id_style).from_datetime(seed_created)
    log.debug(f"Seed created {seed_created.isoformat()}, id: {identifier}")

    new_path = rename_seed(options.target, options.cwd / note_file_name(identifier))
    _write_note(open_for_rewrite(new_path), new_path)

    log.debug(f"Wrote note {new_path}")
    return new_path


def create_note_in_directory(options: EntryOptions) -> Path:
    """
    Create a new note inside a directory with a fresh identifier.

    Raises:
        AlreadyExistsError: If a file with the generated name exists
    """
    log = get_logger("entries.note")

    identifier = get_generator(options.id_style).generate()
    new_path = options.cwd / note_file_name(identifier)
    _write_note(create_exclusive(new_path), new_path)

    log.debug(f"Wrote note {new_path}")
    return new_path
