"""Day-of-week enumeration with name lookup."""

from __future__ import annotations

from enum import StrEnum


class DayOfWeek(StrEnum):
    """Days of the week, Sunday first."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


def days_of_week() -> list[DayOfWeek]:
    """Return every day in declaration order."""
    return list(DayOfWeek)


def day_of_week(name: str) -> DayOfWeek:
    """Look up a day by its exact name (e.g. ``"Sunday"``).

    Raises:
        ValueError: If *name* is not a day name. Matching is case-sensitive.
    """
    return DayOfWeek(name)


def rotate_week(first_day: DayOfWeek) -> list[DayOfWeek]:
    """Return the seven days starting at *first_day*.

    Examples:
        >>> [str(d) for d in rotate_week(DayOfWeek.MONDAY)][:2]
        ['Monday', 'Tuesday']
    """
    days = days_of_week()
    start = days.index(first_day)
    return days[start:] + days[:start]
