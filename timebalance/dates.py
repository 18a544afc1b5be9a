# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar date helpers."""

from calendar import monthrange
from collections.abc import Iterator
from datetime import date, timedelta


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month."""
    _, last_day = monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)


def last_day_of_previous_month(year: int, month: int) -> date:
    """Return the day before the 1st of the given month."""
    return date(year, month, 1) - timedelta(days=1)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def iter_months(start: date, end: date) -> Iterator[tuple[int, int]]:
    """Yield (year, month) for every month touching [start, end]."""
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1


def clip_range(
    start: date, end: date, lower: date, upper: date
) -> tuple[date, date] | None:
    """Clip [start, end] to [lower, upper]; None if they do not intersect."""
    clipped_start = max(start, lower)
    clipped_end = min(end, upper)
    if clipped_start > clipped_end:
        return None
    return clipped_start, clipped_end
