# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Balance, breakdown and entitlement result schemas.

Field names and units are the contract with downstream renderers: hours
are floats, day counts are floats with 0.5 granularity.
"""

import datetime

from timebalance.models import TimeEntry
from timebalance.schemas.common import CamelModel


class MonthlyBreakdown(CamelModel):
    """Itemized time balance of a single month."""

    year: int
    month: int
    previous_balance: float
    worked_hours: float
    adjustments: float
    vacation_credit_hours: float
    sick_leave_credit_hours: float
    holiday_credit_hours: float
    absence_holiday_credit: float
    total_credited: float
    target_hours: float
    monthly_balance: float
    end_of_month_balance: float


class MonthlyAbsenceDays(CamelModel):
    """Absence workdays of one employee within a month."""

    vacation_days: float = 0.0
    sick_days: float = 0.0
    time_off_days: float = 0.0


class AnnualEntitlement(CamelModel):
    """Vacation and sick-day consumption for a calendar year."""

    year: int
    annual_entitlement_days: float
    carryover_days: float
    vacation_days_taken: float
    sick_days_taken: float
    remaining_vacation_days: float


class CarryoverWarning(CamelModel):
    """Whether to remind the employee of expiring carried-over vacation."""

    show_warning: bool
    deadline: datetime.date
    carryover_days: float


class TimesheetSummary(CamelModel):
    """Numbers a timesheet exporter renders for one employee and month."""

    employee_id: int
    employee_name: str
    year: int
    month: int
    breakdown: MonthlyBreakdown
    absence_days: MonthlyAbsenceDays
    remaining_vacation_days: float
    time_entries: list[TimeEntry]


class AbsenceValidationError(CamelModel):
    """A single conflict found for an absence request."""

    code: str
    message: str


class AbsenceValidationResult(CamelModel):
    """Outcome of checking an absence request against existing records."""

    is_valid: bool
    errors: list[AbsenceValidationError] = []
