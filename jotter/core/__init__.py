# Core types, options and errors for jotter

from jotter.core.errors import (
    AlreadyExistsError,
    EntryIOError,
    InvalidInputError,
    JotterError,
    NoCommandError,
    UnknownCommandError,
)
from jotter.core.options import EntryOptions, resolve_kind
from jotter.core.types import EntryKind, IdStyle

__all__ = [
    "AlreadyExistsError",
    "EntryIOError",
    "InvalidInputError",
    "JotterError",
    "NoCommandError",
    "UnknownCommandError",
    "EntryOptions",
    "resolve_kind",
    "EntryKind",
    "IdStyle",
]
