# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for daily schedule evaluation."""

from datetime import date

import pytest

from timebalance.models import TargetHoursModel, WeeklySchedule
from timebalance.services.schedule import (
    derive_targets_from_weekly_schedule,
    is_weekend,
    scheduled_hours_for_day,
)

MONDAY = date(2024, 5, 6)
SATURDAY = date(2024, 5, 4)
SUNDAY = date(2024, 5, 5)


class TestScheduledHoursForDay:
    """Tests for scheduled_hours_for_day."""

    def test_monthly_model_weekday(self, contract_factory):
        """Weekdays use the flat daily target."""
        contract = contract_factory(daily_target_hours=7.5)
        assert scheduled_hours_for_day(contract, MONDAY) == 7.5

    @pytest.mark.parametrize("day", [SATURDAY, SUNDAY])
    def test_monthly_model_weekend(self, contract_factory, day):
        """Weekends are not scheduled on the monthly model."""
        assert scheduled_hours_for_day(contract_factory(), day) == 0

    def test_weekly_model_uses_schedule(self, contract_factory):
        """Weekly contracts read the weekday from the schedule, weekends included."""
        contract = contract_factory(
            target_hours_model=TargetHoursModel.WEEKLY,
            weekly_schedule=WeeklySchedule(mon=6, sat=4),
        )
        assert scheduled_hours_for_day(contract, MONDAY) == 6
        assert scheduled_hours_for_day(contract, SATURDAY) == 4
        assert scheduled_hours_for_day(contract, SUNDAY) == 0

    def test_weekly_model_without_schedule_falls_back(self, contract_factory):
        """A weekly contract lacking a schedule behaves like a monthly one."""
        contract = contract_factory(target_hours_model=TargetHoursModel.WEEKLY)
        assert scheduled_hours_for_day(contract, MONDAY) == 8
        assert scheduled_hours_for_day(contract, SATURDAY) == 0

    def test_is_weekend(self):
        """Saturday and Sunday are weekend days."""
        assert is_weekend(SATURDAY)
        assert is_weekend(SUNDAY)
        assert not is_weekend(MONDAY)


class TestDeriveTargets:
    """Tests for derive_targets_from_weekly_schedule."""

    def test_full_time_week(self):
        """40 hours over five days."""
        schedule = WeeklySchedule(mon=8, tue=8, wed=8, thu=8, fri=8)
        assert derive_targets_from_weekly_schedule(schedule) == (173.33, 8.0)

    def test_uneven_week(self):
        """Daily target is the average over scheduled days."""
        schedule = WeeklySchedule(mon=8, tue=8, sat=4)
        assert derive_targets_from_weekly_schedule(schedule) == (86.67, 6.67)

    def test_empty_week(self):
        """No scheduled days yields zero targets."""
        assert derive_targets_from_weekly_schedule(WeeklySchedule()) == (0.0, 0.0)
