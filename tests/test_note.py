# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Tests for note creation."""

import errno
import re
import uuid
from unittest.mock import patch

import pytest
from ulid import ULID

from jotter.core.errors import AlreadyExistsError, EntryIOError
from jotter.core.options import EntryOptions
from jotter.entries.note import create_note_from_seed, create_note_in_directory, note_file_name
from jotter.utils.fs import file_times
from tests.conftest import split_entry

TIMESTAMP_LINE = re.compile(r"^created_at: \d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}$", re.MULTILINE)


class TestNoteFileName:
    """Tests for note_file_name function."""

    def test_appends_extension(self):
        """Should be <identifier>.md."""
        assert note_file_name("01HRZ8Y6K4Q7G2D8V3N5B1C9XE") == "01HRZ8Y6K4Q7G2D8V3N5B1C9XE.md"


class TestCreateNoteInDirectory:
    """Tests for create_note_in_directory function."""

    def test_creates_ulid_note(self, journal_dir):
        """Default note should be <ulid>.md with empty title and tags."""
        opts = EntryOptions.for_directory(journal_dir)

        path = create_note_in_directory(opts)

        assert [p.name for p in journal_dir.iterdir()] == [path.name]
        assert str(ULID.from_str(path.stem)) == path.stem

        content = path.read_text(encoding="utf-8")
        assert TIMESTAMP_LINE.search(content)
        frontmatter, body = split_entry(content)
        assert frontmatter["title"] is None
        assert frontmatter["tags"] is None
        assert body == ""

    def test_creates_uuid_note(self, journal_dir):
        """--uuid notes should be named with a UUIDv7."""
        opts = EntryOptions.for_directory(journal_dir, uuid=True)

        path = create_note_in_directory(opts)

        assert uuid.UUID(path.stem).version == 7

    def test_notes_sort_by_creation(self, journal_dir):
        """Later notes should sort after earlier ones."""
        opts = EntryOptions.for_directory(journal_dir)

        first = create_note_in_directory(opts)
        second = create_note_in_directory(opts)

        assert first.name[:10] <= second.name[:10]
        assert first != second

    def test_collision_fails(self, journal_dir):
        """An existing file with the generated name is not overwritten."""
        (journal_dir / "fixed.md").write_text("keep")
        opts = EntryOptions.for_directory(journal_dir)

        with patch("jotter.entries.note.get_generator") as get_generator:
            get_generator.return_value.generate.return_value = "fixed"
            with pytest.raises(AlreadyExistsError):
                create_note_in_directory(opts)

        assert (journal_dir / "fixed.md").read_text() == "keep"

    def test_write_failure_is_wrapped(self, journal_dir):
        """An OSError while writing should surface as EntryIOError."""
        opts = EntryOptions.for_directory(journal_dir)

        with patch("jotter.entries.note.render_note", side_effect=OSError(errno.EIO, "Input/output error")):
            with pytest.raises(EntryIOError, match="failed to write"):
                create_note_in_directory(opts)


class TestCreateNoteFromSeed:
    """Tests for create_note_from_seed function."""

    def test_renames_and_fills_seed(self, journal_dir):
        """The seed should become <ulid>.md with note frontmatter."""
        seed = journal_dir / "untitled.md"
        seed.touch()
        opts = EntryOptions.for_file(seed)

        path = create_note_from_seed(opts)

        assert path.parent == journal_dir
        assert not seed.exists()
        assert len(path.stem) == 26
        frontmatter, _ = split_entry(path.read_text(encoding="utf-8"))
        assert set(frontmatter) == {"created_at", "updated_at", "title", "tags"}

    def test_identifier_uses_seed_creation_time(self, journal_dir):
        """The ULID timestamp should come from the seed, not the clock."""
        seed = journal_dir / "untitled.md"
        seed.touch()
        seed_created, _ = file_times(seed)
        opts = EntryOptions.for_file(seed, note=True)

        path = create_note_from_seed(opts)

        assert ULID.from_str(path.stem).milliseconds == int(seed_created.timestamp() * 1000)
