# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Annual vacation and sick-day accounting."""

from collections.abc import Collection, Iterable, Sequence
from datetime import date

from timebalance.dates import clip_range, iter_days
from timebalance.models import AbsenceRequest, AbsenceType, Employee, Holiday
from timebalance.models.holiday import holiday_dates
from timebalance.schemas.balance import AnnualEntitlement, CarryoverWarning
from timebalance.services.absence_classifier import (
    approved_absences_for,
    find_covering_absence,
)
from timebalance.services.contract_resolver import get_contract_for_date
from timebalance.services.schedule import is_weekend

# Month and day of the year that resolve the year's vacation entitlement
ENTITLEMENT_REFERENCE_MONTH = 7
ENTITLEMENT_REFERENCE_DAY = 1

# Carried-over vacation expires after this day of the following year
CARRYOVER_DEADLINE_MONTH = 3
CARRYOVER_DEADLINE_DAY = 31


def _year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def count_workdays_in_range(start: date, end: date, holidays: Collection[date]) -> int:
    """Count Monday to Friday days in [start, end] that are not holidays."""
    return sum(
        1 for d in iter_days(start, end) if not is_weekend(d) and d not in holidays
    )


def _approved_of_type(
    employee_id: int, absence_requests: Iterable[AbsenceRequest], type_: AbsenceType
) -> list[AbsenceRequest]:
    return [
        r for r in approved_absences_for(employee_id, absence_requests) if r.type == type_
    ]


def calculate_annual_vacation_taken(
    employee_id: int,
    absence_requests: Sequence[AbsenceRequest],
    year: int,
    holidays: Iterable[Holiday],
) -> float:
    """Calculate approved vacation days taken within a year.

    Each workday (Monday to Friday, not a holiday) covered by an approved
    vacation counts 1, or 0.5 for a half-day vacation. Requests spanning
    the year boundary only count their days inside the year.

    Args:
        employee_id: The employee ID.
        absence_requests: All absence requests.
        year: The year.
        holidays: Public holidays of the year.

    Returns:
        Vacation days taken.
    """
    year_start, year_end = _year_bounds(year)
    vacations = [
        r
        for r in _approved_of_type(employee_id, absence_requests, AbsenceType.VACATION)
        if r.overlaps(year_start, year_end)
    ]
    excluded = holiday_dates(holidays)

    total = 0.0
    for request in vacations:
        clipped = clip_range(request.start_date, request.end_date, year_start, year_end)
        for day in iter_days(*clipped):
            if is_weekend(day) or day in excluded:
                continue
            # Overlapping vacations count a day only for the first one
            if find_covering_absence(day, vacations) is not request:
                continue
            total += 0.5 if request.is_half_day else 1.0
    return total


def calculate_annual_sick_days(
    employee_id: int,
    absence_requests: Sequence[AbsenceRequest],
    year: int,
    holidays: Iterable[Holiday],
) -> float:
    """Calculate approved sick leave workdays within a year.

    Args:
        employee_id: The employee ID.
        absence_requests: All absence requests.
        year: The year.
        holidays: Public holidays of the year.

    Returns:
        Sick days taken.
    """
    year_start, year_end = _year_bounds(year)
    excluded = holiday_dates(holidays)

    total = 0.0
    for request in _approved_of_type(
        employee_id, absence_requests, AbsenceType.SICK_LEAVE
    ):
        clipped = clip_range(request.start_date, request.end_date, year_start, year_end)
        if clipped is None:
            continue
        total += count_workdays_in_range(*clipped, excluded)
    return total


def calculate_annual_entitlement(
    employee: Employee,
    absence_requests: Sequence[AbsenceRequest],
    year: int,
    holidays: Iterable[Holiday],
    reference_date: date | None = None,
) -> AnnualEntitlement:
    """Summarize vacation entitlement and consumption for a year.

    Args:
        employee: The employee.
        absence_requests: All absence requests.
        year: The year.
        holidays: Public holidays of the year.
        reference_date: Date resolving the year's contract; defaults to
            1 July of ``year``.

    Returns:
        Entitlement, days taken and remaining vacation days.
    """
    holidays = list(holidays)
    if reference_date is None:
        reference_date = date(year, ENTITLEMENT_REFERENCE_MONTH, ENTITLEMENT_REFERENCE_DAY)

    contract = get_contract_for_date(employee, reference_date)
    vacation_taken = calculate_annual_vacation_taken(
        employee.id, absence_requests, year, holidays
    )
    sick_days = calculate_annual_sick_days(employee.id, absence_requests, year, holidays)

    return AnnualEntitlement(
        year=year,
        annual_entitlement_days=contract.vacation_days_per_year,
        carryover_days=employee.vacation_carryover_days,
        vacation_days_taken=vacation_taken,
        sick_days_taken=sick_days,
        remaining_vacation_days=contract.vacation_days_per_year - vacation_taken,
    )


def carryover_deadline(
    year: int,
    month: int = CARRYOVER_DEADLINE_MONTH,
    day: int = CARRYOVER_DEADLINE_DAY,
) -> date:
    """Last day on which vacation carried into ``year`` can be taken."""
    return date(year, month, day)


def check_carryover_warning(
    employee: Employee,
    reference_date: date,
    deadline: date | None = None,
) -> CarryoverWarning:
    """Decide whether to remind an employee of expiring carried-over vacation.

    Args:
        employee: The employee.
        reference_date: The date the check is made for ("today").
        deadline: Expiry date; defaults to the deadline in the reference
            date's year.

    Returns:
        The warning decision.
    """
    if deadline is None:
        deadline = carryover_deadline(reference_date.year)
    carryover = employee.vacation_carryover_days
    show = (
        employee.show_vacation_warning
        and carryover > 0
        and reference_date <= deadline
    )
    return CarryoverWarning(
        show_warning=show, deadline=deadline, carryover_days=carryover
    )
