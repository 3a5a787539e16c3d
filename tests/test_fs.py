# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Tests for filesystem helpers."""

import re
from datetime import datetime, timedelta, timezone

import pytest

from jotter.core.errors import AlreadyExistsError, EntryIOError
from jotter.utils.fs import create_exclusive, file_times, format_timestamp, rename_seed

ISO_WITH_OFFSET = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}$")


class TestFormatTimestamp:
    """Tests for format_timestamp function."""

    def test_keeps_offset(self):
        """Should keep seconds precision and a +HH:MM offset."""
        moment = datetime(2024, 1, 5, 0, 0, 0, 999, tzinfo=timezone(timedelta(hours=9)))
        assert format_timestamp(moment) == "2024-01-05T00:00:00+09:00"

    def test_naive_gets_local_offset(self):
        """Naive datetimes should be treated as local time."""
        assert ISO_WITH_OFFSET.match(format_timestamp(datetime(2024, 1, 5, 12, 0, 0)))


class TestFileTimes:
    """Tests for file_times function."""

    def test_returns_aware_datetimes(self, tmp_path):
        """Should return timezone-aware created/modified times."""
        target = tmp_path / "a.md"
        target.touch()

        created, modified = file_times(target)
        assert created.tzinfo is not None
        assert modified.tzinfo is not None
        assert abs((modified - datetime.now().astimezone()).total_seconds()) < 60

    def test_accepts_file_descriptor(self, tmp_path):
        """Should stat an open file descriptor."""
        target = tmp_path / "a.md"
        with open(target, "w") as handle:
            created, _ = file_times(handle.fileno())
        assert created.tzinfo is not None

    def test_missing_file(self, tmp_path):
        """Should wrap the OSError."""
        with pytest.raises(EntryIOError, match="read metadata of"):
            file_times(tmp_path / "missing.md")


class TestCreateExclusive:
    """Tests for create_exclusive function."""

    def test_creates_file(self, tmp_path):
        """Should create and open a new file."""
        target = tmp_path / "new.md"
        with create_exclusive(target) as handle:
            handle.write("hi\n")
        assert target.read_text() == "hi\n"

    def test_refuses_existing_file(self, tmp_path):
        """Should not overwrite an existing file."""
        target = tmp_path / "taken.md"
        target.write_text("keep")

        with pytest.raises(AlreadyExistsError, match="already exists"):
            create_exclusive(target)
        assert target.read_text() == "keep"

    def test_missing_parent(self, tmp_path):
        """Should wrap other OS errors."""
        with pytest.raises(EntryIOError, match="failed to create"):
            create_exclusive(tmp_path / "missing" / "new.md")


class TestRenameSeed:
    """Tests for rename_seed function."""

    def test_renames(self, tmp_path):
        """Should move the seed to its new name."""
        seed = tmp_path / "untitled.md"
        seed.touch()

        result = rename_seed(seed, tmp_path / "202403.md")
        assert result == tmp_path / "202403.md"
        assert result.exists()
        assert not seed.exists()

    def test_same_name_is_noop(self, tmp_path):
        """Renaming a seed onto itself should leave it in place."""
        seed = tmp_path / "202403.md"
        seed.touch()

        assert rename_seed(seed, seed) == seed
        assert seed.exists()

    def test_refuses_to_clobber(self, tmp_path):
        """Should not replace a different existing file."""
        seed = tmp_path / "untitled.md"
        seed.touch()
        existing = tmp_path / "202403.md"
        existing.write_text("old diary")

        with pytest.raises(AlreadyExistsError):
            rename_seed(seed, existing)
        assert seed.exists()
        assert existing.read_text() == "old diary"
