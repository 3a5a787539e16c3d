# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Resolved invocation options.

Each command validates its target path and format flags into an immutable
EntryOptions before anything on disk is touched (apart from creating a
missing target directory for `new`).
"""

from dataclasses import dataclass
from pathlib import Path

from jotter.core.errors import EntryIOError, InvalidInputError
from jotter.core.types import EntryKind, IdStyle


def resolve_kind(diary: bool, note: bool) -> EntryKind:
    """Pick the entry kind from the --diary/--note flags (note by default)."""
    if diary and note:
        raise InvalidInputError("can't specify both diary and note outputs")
    if diary:
        return EntryKind.DIARY
    return EntryKind.NOTE


@dataclass(frozen=True)
class EntryOptions:
    """What to create, and where."""

    target: Path  # Seed file (init) or output directory (new)
    cwd: Path  # Directory scanned for diaries and written into
    kind: EntryKind
    id_style: IdStyle = IdStyle.ULID

    @classmethod
    def for_file(cls, path: Path, diary: bool = False, note: bool = False) -> "EntryOptions":
        """
        Resolve options for filling an existing, empty seed file in place.

        Raises:
            InvalidInputError: If path is missing, not a file, not empty,
                or both flags are set
        """
        if not path.exists():
            raise InvalidInputError(f"{path} does not exist")
        if not path.is_file():
            raise InvalidInputError(f"{path} is not a file")
        try:
            size = path.stat().st_size
        except OSError as e:
            raise EntryIOError("read metadata of", path, e) from e
        if size > 0:
            raise InvalidInputError(f"{path} is not empty")

        return cls(target=path, cwd=path.parent, kind=resolve_kind(diary, note))

    @classmethod
    def for_directory(
        cls,
        path: Path,
        diary: bool = False,
        note: bool = False,
        uuid: bool = False,
    ) -> "EntryOptions":
        """
        Resolve options for creating a new entry inside a directory.

        A missing directory is created (with parents). The directory is
        canonicalized, so symlinks are resolved.

        Raises:
            InvalidInputError: If more than one format flag is set, or path
                exists but isn't a directory
            EntryIOError: If the directory can't be created
        """
        selected = [flag for flag, on in (("--diary", diary), ("--ulid", note), ("--uuid", uuid)) if on]
        if len(selected) > 1:
            raise InvalidInputError(f"can't specify more than one output format: {', '.join(selected)}")

        if path.exists() and not path.is_dir():
            raise InvalidInputError(f"{path} is not a directory")
        if not path.exists():
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise EntryIOError("create directory", path, e) from e

        kind = EntryKind.DIARY if diary else EntryKind.NOTE
        id_style = IdStyle.UUID if uuid else IdStyle.ULID
        return cls(target=path, cwd=path.resolve(), kind=kind, id_style=id_style)
