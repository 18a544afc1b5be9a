# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
from datetime import date, datetime, time, timedelta

import pytest
from fastapi.testclient import TestClient

from timebalance.api.deps import get_holiday_provider
from timebalance.exceptions import HolidayProviderError
from timebalance.main import app
from timebalance.models import (
    AbsenceRequest,
    AbsenceStatus,
    AbsenceType,
    Contract,
    DayPortion,
    Employee,
    EmploymentType,
    Holiday,
    TimeBalanceAdjustment,
    TimeEntry,
)
from timebalance.services.holiday_provider import HolidayProvider


class FakeHolidayProvider(HolidayProvider):
    """In-memory holiday provider recording the years it was asked for."""

    def __init__(self, holidays: dict[int, list[Holiday]] | None = None) -> None:
        self.holidays = holidays or {}
        self.calls: list[tuple[int, str | None]] = []

    def get_holidays(self, year: int, region: str | None = None) -> list[Holiday]:
        self.calls.append((year, region))
        if region == "XX":
            raise HolidayProviderError("Unsupported holiday region: DE/XX")
        return list(self.holidays.get(year, []))


@pytest.fixture
def holiday_provider() -> FakeHolidayProvider:
    """Fake provider with New Year's Day and Easter Monday 2024."""
    return FakeHolidayProvider(
        {
            2024: [
                Holiday(date=date(2024, 1, 1), name="Neujahr"),
                Holiday(date=date(2024, 4, 1), name="Ostermontag"),
            ]
        }
    )


@pytest.fixture(scope="function")
def client(holiday_provider):
    """Create a test client with the holiday provider overridden."""
    app.dependency_overrides[get_holiday_provider] = lambda: holiday_provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_contract(
    valid_from: date = date(2024, 1, 1),
    monthly_target_hours: float = 160.0,
    daily_target_hours: float = 8.0,
    vacation_days_per_year: float = 25.0,
    **kwargs,
) -> Contract:
    """Build a full-time Monday to Friday contract."""
    kwargs.setdefault("employment_type", EmploymentType.FULL_TIME)
    return Contract(
        valid_from=valid_from,
        monthly_target_hours=monthly_target_hours,
        daily_target_hours=daily_target_hours,
        vacation_days_per_year=vacation_days_per_year,
        **kwargs,
    )


def make_employee(
    employee_id: int = 1,
    first_work_day: date | None = date(2024, 1, 1),
    contracts: list[Contract] | None = None,
    **kwargs,
) -> Employee:
    """Build an employee with a single default contract."""
    return Employee(
        id=employee_id,
        first_name="Erika",
        last_name="Mustermann",
        first_work_day=first_work_day,
        contract_history=contracts if contracts is not None else [make_contract()],
        **kwargs,
    )


def make_entry(
    day: date,
    hours: float,
    employee_id: int = 1,
    break_minutes: float = 0,
) -> TimeEntry:
    """Build a time entry starting at 08:00 on ``day``."""
    start = datetime.combine(day, time(8, 0))
    return TimeEntry(
        employee_id=employee_id,
        start=start,
        end=start + timedelta(hours=hours, minutes=break_minutes),
        break_duration_minutes=break_minutes,
    )


def make_absence(
    start: date,
    end: date | None = None,
    type: AbsenceType = AbsenceType.VACATION,
    status: AbsenceStatus = AbsenceStatus.APPROVED,
    employee_id: int = 1,
    day_portion: DayPortion | None = None,
    absence_id: int | None = None,
) -> AbsenceRequest:
    """Build an absence request, approved by default."""
    return AbsenceRequest(
        id=absence_id,
        employee_id=employee_id,
        type=type,
        status=status,
        start_date=start,
        end_date=end or start,
        day_portion=day_portion,
    )


def make_adjustment(day: date, hours: float, employee_id: int = 1) -> TimeBalanceAdjustment:
    """Build a manual balance adjustment."""
    return TimeBalanceAdjustment(employee_id=employee_id, date=day, hours=hours)


def full_month_entries(
    year: int,
    month: int,
    hours: float = 8.0,
    skip: set[date] | None = None,
    employee_id: int = 1,
) -> list[TimeEntry]:
    """One entry per weekday of the month, except the ``skip`` dates."""
    skip = skip or set()
    entries = []
    day = date(year, month, 1)
    while day.month == month:
        if day.weekday() < 5 and day not in skip:
            entries.append(make_entry(day, hours, employee_id=employee_id))
        day += timedelta(days=1)
    return entries


@pytest.fixture
def employee() -> Employee:
    """Full-time employee starting 2024-01-01 with 160h/8h targets."""
    return make_employee()


@pytest.fixture
def contract_factory():
    """Factory for contracts."""
    return make_contract


@pytest.fixture
def employee_factory():
    """Factory for employees."""
    return make_employee


@pytest.fixture
def entry_factory():
    """Factory for time entries."""
    return make_entry


@pytest.fixture
def absence_factory():
    """Factory for absence requests."""
    return make_absence


@pytest.fixture
def adjustment_factory():
    """Factory for manual adjustments."""
    return make_adjustment


@pytest.fixture
def month_entries_factory():
    """Factory for a month of weekday time entries."""
    return full_month_entries
