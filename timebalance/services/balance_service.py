# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Cumulative time balance calculation.

The balance as of a date is

    starting balance
    + worked hours + manual adjustments
    + holiday / vacation / sick leave credits
    - monthly target hours of every month since the first work day

It is computed as a fold over month segments. A month-end balance is
therefore the previous month-end balance plus that month's delta, which is
exactly how the monthly breakdown chains its months.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from timebalance.dates import iter_days, iter_months, month_bounds
from timebalance.models import (
    AbsenceRequest,
    DayKind,
    Employee,
    HolidaysByYear,
    TimeBalanceAdjustment,
    TimeEntry,
)
from timebalance.models.holiday import holiday_dates_for_year
from timebalance.services.absence_classifier import (
    approved_absences_for,
    classify_day,
    day_credit_hours,
)
from timebalance.services.contract_resolver import get_contract_for_date
from timebalance.services.schedule import scheduled_hours_for_day


@dataclass(frozen=True)
class MonthTotals:
    """Balance components of one month segment."""

    worked_hours: float = 0.0
    adjustments: float = 0.0
    vacation_credit_hours: float = 0.0
    sick_leave_credit_hours: float = 0.0
    holiday_credit_hours: float = 0.0
    target_hours: float = 0.0

    @property
    def absence_holiday_credit(self) -> float:
        """Vacation, sick leave and holiday credit combined."""
        return (
            self.vacation_credit_hours
            + self.sick_leave_credit_hours
            + self.holiday_credit_hours
        )

    @property
    def total_credited(self) -> float:
        """All hours credited in the segment."""
        return self.worked_hours + self.absence_holiday_credit + self.adjustments

    @property
    def monthly_balance(self) -> float:
        """Credited hours minus the month's target."""
        return self.total_credited - self.target_hours


EMPTY_MONTH = MonthTotals()


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


class BalanceLedger:
    """Time balance of one employee over an immutable snapshot.

    Month totals and balances are memoised per ledger. Records are frozen
    and filtered once at construction, so cached values cannot go stale;
    build a new ledger when the snapshot changes.
    """

    def __init__(
        self,
        employee: Employee,
        time_entries: Iterable[TimeEntry],
        absence_requests: Iterable[AbsenceRequest],
        adjustments: Iterable[TimeBalanceAdjustment],
        holidays_by_year: HolidaysByYear,
    ) -> None:
        """Initialize the ledger.

        Args:
            employee: The employee.
            time_entries: Time entries; other employees' entries are ignored.
            absence_requests: Absence requests; only the employee's approved
                requests are used.
            adjustments: Manual balance adjustments.
            holidays_by_year: Public holidays per year. Missing years count
                as having no holidays.
        """
        self.employee = employee
        self.time_entries = tuple(
            e for e in time_entries if e.employee_id == employee.id
        )
        self.adjustments = tuple(
            a for a in adjustments if a.employee_id == employee.id
        )
        self.approved_absences = tuple(
            approved_absences_for(employee.id, absence_requests)
        )
        self.holidays_by_year = holidays_by_year
        self._holiday_dates: dict[int, frozenset[date]] = {}
        self._full_months: dict[tuple[int, int], MonthTotals] = {}
        self._balances: dict[date, float] = {}

    @property
    def first_work_day(self) -> date | None:
        """The employee's first work day."""
        return self.employee.first_work_day

    def holiday_dates(self, year: int) -> frozenset[date]:
        """Holiday dates of a year."""
        if year not in self._holiday_dates:
            self._holiday_dates[year] = holiday_dates_for_year(
                self.holidays_by_year, year
            )
        return self._holiday_dates[year]

    def balance(self, end_date: date | datetime) -> float:
        """Cumulative balance as of the end of ``end_date``.

        Args:
            end_date: Last day included; the time of day is ignored.

        Returns:
            Balance in hours. Dates before the first work day return the
            starting balance unchanged.
        """
        end_date = _as_date(end_date)
        starting = self.employee.starting_time_balance_hours
        first_day = self.first_work_day
        if first_day is None or end_date < first_day:
            return starting

        if end_date not in self._balances:
            result = starting
            for year, month in iter_months(first_day, end_date):
                result += self.month_totals(year, month, end_date).monthly_balance
            self._balances[end_date] = result
        return self._balances[end_date]

    def month_totals(
        self, year: int, month: int, period_end: date | None = None
    ) -> MonthTotals:
        """Balance components of a month, optionally cut off at ``period_end``.

        The segment starts at the later of the 1st and the first work day.
        Entries and adjustments dated before the first work day's month are
        counted in that first month, matching the cumulative balance.

        Args:
            year: Year.
            month: Month (1 = January).
            period_end: Optional last day to include.

        Returns:
            The segment totals; empty for months outside the employee's
            active period.
        """
        month_start, month_end = month_bounds(year, month)
        segment_end = month_end if period_end is None else min(month_end, period_end)
        first_day = self.first_work_day
        if first_day is None or segment_end < first_day or segment_end < month_start:
            return EMPTY_MONTH

        if segment_end == month_end:
            key = (year, month)
            if key not in self._full_months:
                self._full_months[key] = self._compute_totals(
                    month_start, month_end
                )
            return self._full_months[key]
        return self._compute_totals(month_start, segment_end)

    def _compute_totals(self, month_start: date, segment_end: date) -> MonthTotals:
        first_day = self.first_work_day
        is_first_month = month_start <= first_day
        records_from = None if is_first_month else month_start
        days_from = first_day if is_first_month else month_start

        worked = sum(
            (
                e.worked_hours
                for e in self.time_entries
                if _within(e.work_date, records_from, segment_end)
            ),
            0.0,
        )
        adjustments = sum(
            (
                a.hours
                for a in self.adjustments
                if _within(a.date, records_from, segment_end)
            ),
            0.0,
        )

        credits = {DayKind.VACATION: 0.0, DayKind.SICK_LEAVE: 0.0, DayKind.HOLIDAY: 0.0}
        for day in iter_days(days_from, segment_end):
            contract = get_contract_for_date(self.employee, day)
            scheduled = scheduled_hours_for_day(contract, day)
            if scheduled <= 0:
                continue
            classification = classify_day(
                day, self.approved_absences, self.holiday_dates(day.year)
            )
            if classification.earns_credit:
                credits[classification.kind] += day_credit_hours(
                    classification, scheduled
                )

        target = get_contract_for_date(self.employee, month_start).monthly_target_hours
        return MonthTotals(
            worked_hours=worked,
            adjustments=adjustments,
            vacation_credit_hours=credits[DayKind.VACATION],
            sick_leave_credit_hours=credits[DayKind.SICK_LEAVE],
            holiday_credit_hours=credits[DayKind.HOLIDAY],
            target_hours=target,
        )


def _within(day: date, lower: date | None, upper: date) -> bool:
    return (lower is None or day >= lower) and day <= upper


def calculate_balance(
    employee: Employee,
    end_date: date | datetime,
    time_entries: Iterable[TimeEntry],
    absence_requests: Iterable[AbsenceRequest],
    adjustments: Iterable[TimeBalanceAdjustment],
    holidays_by_year: HolidaysByYear,
) -> float:
    """Calculate an employee's time balance as of ``end_date``.

    Args:
        employee: The employee.
        end_date: Last day included.
        time_entries: All time entries.
        absence_requests: All absence requests.
        adjustments: All manual balance adjustments.
        holidays_by_year: Public holidays per year.

    Returns:
        The balance in hours.
    """
    ledger = BalanceLedger(
        employee, time_entries, absence_requests, adjustments, holidays_by_year
    )
    return ledger.balance(end_date)
