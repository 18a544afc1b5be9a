# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday records."""

import datetime
from collections.abc import Iterable, Mapping, Sequence

from timebalance.models.base import RecordModel


class Holiday(RecordModel):
    """A public holiday, scoped to the region it was looked up for."""

    date: datetime.date
    name: str


HolidaysByYear = Mapping[int, Sequence[Holiday]]


def holiday_dates(holidays: Iterable[Holiday]) -> frozenset[datetime.date]:
    """Return the set of dates of the given holidays."""
    return frozenset(h.date for h in holidays)


def holiday_dates_for_year(
    holidays_by_year: HolidaysByYear, year: int
) -> frozenset[datetime.date]:
    """Return the holiday dates of ``year``; a missing year has none."""
    return holiday_dates(holidays_by_year.get(year, ()))
