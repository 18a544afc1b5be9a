# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Request and response schemas of the calculation API."""

import datetime

from pydantic import Field

from timebalance.models import (
    AbsenceRequest,
    Employee,
    Holiday,
    TimeBalanceAdjustment,
    TimeEntry,
    TimeFormat,
)
from timebalance.schemas.common import CamelModel


class EmployeeSnapshot(CamelModel):
    """All records of one employee that a calculation runs over.

    Holiday years left out of ``holidays_by_year`` are looked up from the
    configured holiday provider.
    """

    employee: Employee
    time_entries: list[TimeEntry] = []
    absence_requests: list[AbsenceRequest] = []
    adjustments: list[TimeBalanceAdjustment] = []
    holidays_by_year: dict[int, list[Holiday]] | None = None
    region: str | None = None


class BalanceRequest(CamelModel):
    """Schema for a balance calculation."""

    snapshot: EmployeeSnapshot
    end_date: datetime.date
    time_format: TimeFormat | None = None


class BalanceResponse(CamelModel):
    """Schema for balance responses."""

    employee_id: int
    end_date: datetime.date
    balance_hours: float
    formatted: str


class MonthlyBreakdownRequest(CamelModel):
    """Schema for a single month breakdown."""

    snapshot: EmployeeSnapshot
    year: int = Field(..., ge=1900, le=2200)
    month: int = Field(..., ge=1, le=12)


class YearlyBreakdownRequest(CamelModel):
    """Schema for the twelve breakdowns of a year."""

    snapshot: EmployeeSnapshot
    year: int = Field(..., ge=1900, le=2200)


class AnnualEntitlementRequest(CamelModel):
    """Schema for annual vacation and sick-day accounting."""

    snapshot: EmployeeSnapshot
    year: int = Field(..., ge=1900, le=2200)
    reference_date: datetime.date | None = None


class CarryoverWarningRequest(CamelModel):
    """Schema for the carried-over vacation reminder check."""

    employee: Employee
    reference_date: datetime.date
    deadline: datetime.date | None = None


class TimesheetSummaryRequest(CamelModel):
    """Schema for monthly timesheet export data."""

    snapshot: EmployeeSnapshot
    year: int = Field(..., ge=1900, le=2200)
    month: int = Field(..., ge=1, le=12)


class AbsenceValidationRequest(CamelModel):
    """Schema for checking a candidate absence range."""

    employee_id: int
    start_date: datetime.date
    end_date: datetime.date
    exclude_id: int | None = None
    existing_requests: list[AbsenceRequest] = []
    time_entries: list[TimeEntry] = []
