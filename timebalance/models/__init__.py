# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Input record models package."""

from timebalance.models.absence import AbsenceRequest
from timebalance.models.base import RecordModel
from timebalance.models.employee import Contract, Employee, WeeklySchedule
from timebalance.models.enums import (
    AbsenceStatus,
    AbsenceType,
    DayKind,
    DayPortion,
    EmploymentType,
    TargetHoursModel,
    TimeFormat,
)
from timebalance.models.holiday import Holiday, HolidaysByYear
from timebalance.models.time_entry import TimeBalanceAdjustment, TimeEntry

__all__ = [
    "AbsenceRequest",
    "AbsenceStatus",
    "AbsenceType",
    "Contract",
    "DayKind",
    "DayPortion",
    "Employee",
    "EmploymentType",
    "Holiday",
    "HolidaysByYear",
    "RecordModel",
    "TargetHoursModel",
    "TimeBalanceAdjustment",
    "TimeEntry",
    "TimeFormat",
    "WeeklySchedule",
]
