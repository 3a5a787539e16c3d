# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""jotter CLI - Entry point for scaffolding journal entries."""

import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Optional

from jotter.core.errors import JotterError, NoCommandError, UnknownCommandError
from jotter.logging import log_error

USAGE = """jotter - scaffold diary and note entries
Usage: jotter <command> [args]

Commands:
  init <FILE>     Fill an existing empty file in as a new entry
  new [PATH]      Create a new entry in a directory

Run 'jotter <command> --help' for the command's options."""


def get_installed_version() -> str:
    """Get the currently installed version of jotter."""
    try:
        return get_version("jotter")
    except PackageNotFoundError:
        from jotter import __version__

        return __version__


def dispatch(command: str, args: list[str]) -> int:
    """Run a subcommand by name."""
    match command:
        case "init":
            from jotter.commands.init import run
            return run(args)
        case "new":
            from jotter.commands.new import run
            return run(args)
        case _:
            raise UnknownCommandError(command)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the jotter CLI."""
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] in ("--help", "-h"):
        print(USAGE)
        return 0
    if argv and argv[0] in ("--version", "-V"):
        print(f"jotter {get_installed_version()}")
        return 0

    try:
        if not argv:
            print(USAGE, file=sys.stderr)
            raise NoCommandError()
        return dispatch(argv[0], argv[1:])
    except JotterError as e:
        log_error(argv[0] if argv else "jotter", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
