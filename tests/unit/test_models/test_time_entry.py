# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for time entry records."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from timebalance.models import TimeEntry


class TestTimeEntry:
    """Tests for TimeEntry."""

    def test_worked_hours_subtract_break(self):
        """Worked hours are the span minus the break."""
        entry = TimeEntry(
            employee_id=1,
            start=datetime(2024, 1, 2, 8, 0),
            end=datetime(2024, 1, 2, 16, 30),
            break_duration_minutes=30,
        )
        assert entry.gross_hours == 8.5
        assert entry.worked_hours == 8.0

    def test_overnight_entry_belongs_to_start_date(self):
        """An entry crossing midnight counts on the day it starts."""
        entry = TimeEntry(
            employee_id=1,
            start=datetime(2024, 1, 31, 22, 0),
            end=datetime(2024, 2, 1, 2, 0),
        )
        assert entry.work_date == date(2024, 1, 31)
        assert entry.worked_hours == 4.0

    def test_rejects_end_before_start(self):
        """An entry cannot end before it starts."""
        with pytest.raises(ValidationError):
            TimeEntry(
                employee_id=1,
                start=datetime(2024, 1, 2, 16, 0),
                end=datetime(2024, 1, 2, 8, 0),
            )

    def test_rejects_negative_break(self):
        """Breaks cannot be negative."""
        with pytest.raises(ValidationError):
            TimeEntry(
                employee_id=1,
                start=datetime(2024, 1, 2, 8, 0),
                end=datetime(2024, 1, 2, 9, 0),
                break_duration_minutes=-5,
            )

    def test_ignores_bookkeeping_fields(self):
        """Customer and activity ids in client payloads are accepted and dropped."""
        entry = TimeEntry.model_validate(
            {
                "employeeId": 1,
                "start": "2024-01-02T08:00:00",
                "end": "2024-01-02T12:00:00",
                "customerId": 4,
                "activityId": 9,
            }
        )

        assert entry.worked_hours == 4.0
        assert "customer_id" not in entry.model_dump()
