"""Lesson on optional values."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Return the pieces of ice cream left at an hour, or None for invalid hours.

    Five pieces remain before 22:00; after that they have all been eaten.
    """
    if time_of_day < 0:
        raise ValueError("time_of_day must not be negative")
    if time_of_day < 22:
        return 5
    if time_of_day < 24:
        return 0
    return None