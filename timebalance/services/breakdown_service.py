# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Month-by-month breakdown of the time balance."""

from collections.abc import Iterable, Sequence

from timebalance.dates import iter_days, last_day_of_previous_month, month_bounds
from timebalance.models import (
    AbsenceRequest,
    AbsenceType,
    Employee,
    Holiday,
    HolidaysByYear,
    TimeBalanceAdjustment,
    TimeEntry,
)
from timebalance.models.holiday import holiday_dates
from timebalance.schemas.balance import MonthlyAbsenceDays, MonthlyBreakdown
from timebalance.services.absence_classifier import (
    approved_absences_for,
    find_covering_absence,
)
from timebalance.services.balance_service import BalanceLedger
from timebalance.services.schedule import is_weekend


def breakdown_from_ledger(ledger: BalanceLedger, year: int, month: int) -> MonthlyBreakdown:
    """Build the itemized breakdown of one month from a ledger.

    ``end_of_month_balance`` equals the next month's ``previous_balance``.
    """
    previous_balance = ledger.balance(last_day_of_previous_month(year, month))
    totals = ledger.month_totals(year, month)
    return MonthlyBreakdown(
        year=year,
        month=month,
        previous_balance=previous_balance,
        worked_hours=totals.worked_hours,
        adjustments=totals.adjustments,
        vacation_credit_hours=totals.vacation_credit_hours,
        sick_leave_credit_hours=totals.sick_leave_credit_hours,
        holiday_credit_hours=totals.holiday_credit_hours,
        absence_holiday_credit=totals.absence_holiday_credit,
        total_credited=totals.total_credited,
        target_hours=totals.target_hours,
        monthly_balance=totals.monthly_balance,
        end_of_month_balance=previous_balance + totals.monthly_balance,
    )


def calculate_monthly_breakdown(
    employee: Employee,
    year: int,
    month: int,
    time_entries: Iterable[TimeEntry],
    absence_requests: Iterable[AbsenceRequest],
    adjustments: Iterable[TimeBalanceAdjustment],
    holidays_by_year: HolidaysByYear,
) -> MonthlyBreakdown:
    """Calculate the balance breakdown of a single month.

    Args:
        employee: The employee.
        year: Year.
        month: Month (1 = January).
        time_entries: All time entries.
        absence_requests: All absence requests.
        adjustments: All manual balance adjustments.
        holidays_by_year: Public holidays per year; include the previous
            year when breaking down January.

    Returns:
        The itemized breakdown.
    """
    ledger = BalanceLedger(
        employee, time_entries, absence_requests, adjustments, holidays_by_year
    )
    return breakdown_from_ledger(ledger, year, month)


def calculate_yearly_breakdowns(
    employee: Employee,
    year: int,
    time_entries: Iterable[TimeEntry],
    absence_requests: Iterable[AbsenceRequest],
    adjustments: Iterable[TimeBalanceAdjustment],
    holidays_by_year: HolidaysByYear,
) -> list[MonthlyBreakdown]:
    """Calculate the breakdowns of all twelve months of a year.

    One ledger is shared across the months, so the history before the
    year is walked only once.
    """
    ledger = BalanceLedger(
        employee, time_entries, absence_requests, adjustments, holidays_by_year
    )
    return [breakdown_from_ledger(ledger, year, month) for month in range(1, 13)]


def calculate_absence_days_in_month(
    employee_id: int,
    absence_requests: Sequence[AbsenceRequest],
    year: int,
    month: int,
    holidays: Iterable[Holiday],
) -> MonthlyAbsenceDays:
    """Count absence workdays of an employee within a month.

    Only Monday to Friday days that are not public holidays are counted.
    Half-day vacation counts as 0.5.

    Args:
        employee_id: The employee ID.
        absence_requests: All absence requests; only approved ones count.
        year: Year.
        month: Month (1 = January).
        holidays: Public holidays of the year.

    Returns:
        Vacation, sick and time-off day counts.
    """
    month_start, month_end = month_bounds(year, month)
    relevant = [
        r
        for r in approved_absences_for(employee_id, absence_requests)
        if r.overlaps(month_start, month_end)
    ]
    excluded = holiday_dates(holidays)

    vacation_days = 0.0
    sick_days = 0.0
    time_off_days = 0.0
    for day in iter_days(month_start, month_end):
        if is_weekend(day) or day in excluded:
            continue
        absence = find_covering_absence(day, relevant)
        if absence is None:
            continue
        if absence.type == AbsenceType.VACATION:
            vacation_days += 0.5 if absence.is_half_day else 1.0
        elif absence.type == AbsenceType.SICK_LEAVE:
            sick_days += 1.0
        elif absence.type == AbsenceType.TIME_OFF:
            time_off_days += 1.0

    return MonthlyAbsenceDays(
        vacation_days=vacation_days,
        sick_days=sick_days,
        time_off_days=time_off_days,
    )
