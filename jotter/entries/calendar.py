# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Calendar arithmetic for monthly diary files."""

from dataclasses import dataclass
from datetime import date, timedelta

WEEKDAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


@dataclass(frozen=True)
class DaySection:
    """One dated section of a diary file."""

    day: date
    weekday: str  # lowercase English name

    @property
    def heading(self) -> str:
        """Heading text, e.g. 2024-03-01-friday."""
        return f"{self.day.isoformat()}-{self.weekday}"


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month: first of the next month, minus one day."""
    if month == 12:
        first_of_next = date(year + 1, 1, 1)
    else:
        first_of_next = date(year, month + 1, 1)
    return (first_of_next - timedelta(days=1)).day


def month_days(year: int, month: int) -> list[DaySection]:
    """Build one DaySection per calendar day of the month, in order."""
    first = date(year, month, 1)
    weekday = first.weekday()
    sections = []
    for offset in range(days_in_month(year, month)):
        sections.append(DaySection(first + timedelta(days=offset), WEEKDAY_NAMES[weekday]))
        weekday = (weekday + 1) % 7
    return sections
