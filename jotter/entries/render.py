# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Render entry content from the Jinja2 templates in entries/templates/."""

from datetime import datetime
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from jotter.entries.calendar import month_days
from jotter.entries.rollover import MonthKey
from jotter.utils.fs import format_timestamp

# Full-width space: keeps each day's body line non-empty so editors don't collapse it
DAY_PLACEHOLDER = "\u3000"


def get_templates_dir() -> Path:
    """Get the directory holding the entry templates."""
    return Path(__file__).parent / "templates"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Jinja2 environment for entry templates."""
    # nosec B701: autoescape not needed - generating markdown, not HTML
    return Environment(  # nosec B701
        loader=FileSystemLoader(str(get_templates_dir())),
        keep_trailing_newline=True,
        trim_blocks=True,
        undefined=StrictUndefined,
    )


def render_diary(key: MonthKey, created_at: datetime, updated_at: datetime) -> str:
    """Render a monthly diary: frontmatter plus one section per day."""
    year, month = key
    template = get_environment().get_template("diary.md.j2")
    return template.render(
        created_at=format_timestamp(created_at),
        updated_at=format_timestamp(updated_at),
        sections=month_days(year, month),
        placeholder=DAY_PLACEHOLDER,
    )


def render_note(created_at: datetime, updated_at: datetime) -> str:
    """Render a note: frontmatter with empty title and tags."""
    template = get_environment().get_template("note.md.j2")
    return template.render(
        created_at=format_timestamp(created_at),
        updated_at=format_timestamp(updated_at),
    )
