# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Exceptions raised by jotter commands.

Every failure a user can trigger derives from JotterError. The CLI entry
point turns them into a single "Error: <message>" line on stderr.
"""

from pathlib import Path


class JotterError(Exception):
    """Base class for all jotter failures."""


class InvalidInputError(JotterError):
    """Target path or flags don't satisfy the command's contract."""


class AlreadyExistsError(JotterError):
    """The computed output file name is already taken."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} already exists")


class EntryIOError(JotterError):
    """A filesystem operation failed."""

    def __init__(self, operation: str, path: Path, cause: OSError):
        self.operation = operation
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"failed to {operation} {path}: {reason}")


class NoCommandError(JotterError):
    """No subcommand was given."""

    def __init__(self):
        super().__init__("No subcommand provided")


class UnknownCommandError(JotterError):
    """The subcommand isn't one jotter knows."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown subcommand: {command}")
