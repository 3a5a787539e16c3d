# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Sortable identifiers for note file names.

Both flavours embed a millisecond timestamp in their leading bits, so file
names sort in creation order.
"""

from abc import ABC, abstractmethod
from datetime import datetime

import uuid6
from ulid import ULID

from jotter.core.types import IdStyle


class IdGenerator(ABC):
    """Generates time-ordered identifiers."""

    @abstractmethod
    def generate(self) -> str:
        """A fresh identifier for the current instant."""

    @abstractmethod
    def from_datetime(self, moment: datetime) -> str:
        """An identifier embedding the given instant."""


class UlidGenerator(IdGenerator):
    """ULIDs, e.g. 01HRZ8Y6K4Q7G2D8V3N5B1C9XE."""

    def generate(self) -> str:
        return str(ULID())

    def from_datetime(self, moment: datetime) -> str:
        return str(ULID.from_datetime(moment))


class UuidGenerator(IdGenerator):
    """UUIDv7, e.g. 018e3f2a-6b1c-7d4e-9f00-1a2b3c4d5e6f."""

    def generate(self) -> str:
        return str(uuid6.uuid7())

    def from_datetime(self, moment: datetime) -> str:
        # A ULID already has the v7 layout: 48-bit ms timestamp then random bits
        seed = ULID.from_datetime(moment)
        return str(uuid6.UUID(int=int(seed), version=7))


GENERATORS: dict[IdStyle, type[IdGenerator]] = {
    IdStyle.ULID: UlidGenerator,
    IdStyle.UUID: UuidGenerator,
}


def get_generator(style: IdStyle = IdStyle.ULID) -> IdGenerator:
    """Get the generator for an identifier style."""
    return GENERATORS[style]()
