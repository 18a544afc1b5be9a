# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for the time balance records."""

from enum import Enum


class EmploymentType(str, Enum):
    """Employment type enumeration."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    MINI_JOB = "mini_job"


class TargetHoursModel(str, Enum):
    """How a contract defines its daily target hours.

    MONTHLY: flat daily target on Monday to Friday.
    WEEKLY: per-weekday schedule (weekends may carry hours).
    """

    MONTHLY = "monthly"
    WEEKLY = "weekly"


class AbsenceType(str, Enum):
    """Absence type enumeration."""

    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    TIME_OFF = "time_off"


class AbsenceStatus(str, Enum):
    """Absence request status enumeration.

    Status flow:
        PENDING → APPROVED
           ↓
        REJECTED

    A pending request may also be retracted (removed) by its owner.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DayPortion(str, Enum):
    """Portion of a single day covered by an absence."""

    FULL = "full"
    AM = "am"
    PM = "pm"


class DayKind(str, Enum):
    """Classification of a calendar day for crediting purposes."""

    HOLIDAY = "holiday"
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    TIME_OFF = "time_off"
    NONE = "none"


class TimeFormat(str, Enum):
    """Display format for hour values."""

    DECIMAL = "decimal"
    HOURS_MINUTES = "hours_minutes"
