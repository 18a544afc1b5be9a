# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Worked time entries and manual balance adjustments."""

import datetime

from pydantic import Field, model_validator

from timebalance.models.base import RecordModel


class TimeEntry(RecordModel):
    """A worked session, attributed to the calendar date it starts on."""

    employee_id: int
    start: datetime.datetime
    end: datetime.datetime
    break_duration_minutes: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def validate_times(self) -> "TimeEntry":
        """Ensure the entry does not end before it starts."""
        if self.end < self.start:
            raise ValueError("Time entry end must not be before its start")
        return self

    @property
    def work_date(self) -> datetime.date:
        """Calendar date the entry is attributed to."""
        return self.start.date()

    @property
    def gross_hours(self) -> float:
        """Hours between start and end."""
        return (self.end - self.start).total_seconds() / 3600

    @property
    def worked_hours(self) -> float:
        """Gross hours minus the break."""
        return self.gross_hours - self.break_duration_minutes / 60


class TimeBalanceAdjustment(RecordModel):
    """Manual correction, counted in full on its date."""

    employee_id: int
    date: datetime.date
    hours: float
    reason: str | None = None
