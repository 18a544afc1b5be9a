# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Data for monthly timesheet exports."""

from collections.abc import Sequence
from datetime import date

from timebalance.dates import month_bounds
from timebalance.models import (
    AbsenceRequest,
    Employee,
    HolidaysByYear,
    TimeBalanceAdjustment,
    TimeEntry,
)
from timebalance.schemas.balance import TimesheetSummary
from timebalance.services.breakdown_service import (
    calculate_absence_days_in_month,
    calculate_monthly_breakdown,
)
from timebalance.services.contract_resolver import get_contract_for_date
from timebalance.services.entitlement_service import calculate_annual_vacation_taken

# Day of the month resolving the contract for remaining vacation
REMAINING_VACATION_REFERENCE_DAY = 15


def build_timesheet_summary(
    employee: Employee,
    year: int,
    month: int,
    time_entries: Sequence[TimeEntry],
    absence_requests: Sequence[AbsenceRequest],
    adjustments: Sequence[TimeBalanceAdjustment],
    holidays_by_year: HolidaysByYear,
) -> TimesheetSummary:
    """Collect everything a timesheet exporter renders for one month.

    Args:
        employee: The employee.
        year: Year.
        month: Month (1 = January).
        time_entries: All time entries.
        absence_requests: All absence requests.
        adjustments: All manual balance adjustments.
        holidays_by_year: Public holidays per year.

    Returns:
        Breakdown, absence day counts, remaining vacation and the month's
        time entries in chronological order.
    """
    year_holidays = list(holidays_by_year.get(year, ()))
    breakdown = calculate_monthly_breakdown(
        employee,
        year,
        month,
        time_entries,
        absence_requests,
        adjustments,
        holidays_by_year,
    )
    absence_days = calculate_absence_days_in_month(
        employee.id, absence_requests, year, month, year_holidays
    )

    vacation_taken = calculate_annual_vacation_taken(
        employee.id, absence_requests, year, year_holidays
    )
    contract = get_contract_for_date(
        employee, date(year, month, REMAINING_VACATION_REFERENCE_DAY)
    )

    month_start, month_end = month_bounds(year, month)
    entries = sorted(
        (
            e
            for e in time_entries
            if e.employee_id == employee.id and month_start <= e.work_date <= month_end
        ),
        key=lambda e: e.start,
    )

    return TimesheetSummary(
        employee_id=employee.id,
        employee_name=employee.full_name,
        year=year,
        month=month,
        breakdown=breakdown,
        absence_days=absence_days,
        remaining_vacation_days=contract.vacation_days_per_year - vacation_taken,
        time_entries=entries,
    )
