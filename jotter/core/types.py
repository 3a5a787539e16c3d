# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Core types and enums for jotter."""

from enum import Enum


class EntryKind(str, Enum):
    """Kinds of entries jotter can scaffold."""

    DIARY = "DIARY"  # One file per month, a section per day
    NOTE = "NOTE"  # One file per note, named by a sortable identifier


class IdStyle(str, Enum):
    """Identifier flavours used for note file names."""

    ULID = "ULID"  # 26-char Crockford base32, default
    UUID = "UUID"  # Time-ordered UUIDv7
