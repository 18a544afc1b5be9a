# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee and effective-dated contract records."""

from datetime import date

from pydantic import AliasChoices, Field, field_validator

from timebalance.models.base import RecordModel
from timebalance.models.enums import EmploymentType, TargetHoursModel

WEEKDAY_KEYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


class WeeklySchedule(RecordModel):
    """Scheduled hours per weekday, used by contracts on the weekly model."""

    mon: float = Field(default=0.0, ge=0)
    tue: float = Field(default=0.0, ge=0)
    wed: float = Field(default=0.0, ge=0)
    thu: float = Field(default=0.0, ge=0)
    fri: float = Field(default=0.0, ge=0)
    sat: float = Field(default=0.0, ge=0)
    sun: float = Field(default=0.0, ge=0)

    def hours_for(self, day: date) -> float:
        """Return the scheduled hours for the weekday of ``day``."""
        return getattr(self, WEEKDAY_KEYS[day.weekday()])

    @property
    def weekly_total(self) -> float:
        """Sum of scheduled hours over the week."""
        return sum(getattr(self, key) for key in WEEKDAY_KEYS)

    @property
    def working_days(self) -> int:
        """Number of weekdays with scheduled hours."""
        return sum(1 for key in WEEKDAY_KEYS if getattr(self, key) > 0)


class Contract(RecordModel):
    """Snapshot of an employee's working-hours terms, effective from a date."""

    valid_from: date
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    monthly_target_hours: float = Field(default=0.0, ge=0)
    daily_target_hours: float = Field(default=0.0, ge=0)
    vacation_days_per_year: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices(
            "vacation_days_per_year", "vacationDaysPerYear", "vacationDays"
        ),
        serialization_alias="vacationDaysPerYear",
    )
    target_hours_model: TargetHoursModel = TargetHoursModel.MONTHLY
    weekly_schedule: WeeklySchedule | None = None

    @property
    def uses_weekly_schedule(self) -> bool:
        """True when daily targets come from the weekly schedule."""
        return (
            self.target_hours_model == TargetHoursModel.WEEKLY
            and self.weekly_schedule is not None
        )


class Employee(RecordModel):
    """Employee with an ordered, effective-dated contract history.

    The history is stored sorted ascending by ``valid_from``; duplicate
    ``valid_from`` dates are rejected. An empty history is accepted here and
    handled by the contract resolver.
    """

    id: int
    first_name: str = ""
    last_name: str = ""
    first_work_day: date | None = None
    starting_time_balance_hours: float = 0.0
    contract_history: tuple[Contract, ...] = ()

    # Leave preferences
    show_vacation_warning: bool = True
    vacation_carryover_days: float = Field(default=0.0, ge=0)

    @field_validator("contract_history")
    @classmethod
    def validate_contract_history(
        cls, v: tuple[Contract, ...]
    ) -> tuple[Contract, ...]:
        """Sort contracts by valid_from and reject duplicate dates."""
        seen: set[date] = set()
        for contract in v:
            if contract.valid_from in seen:
                raise ValueError(
                    f"Duplicate contract valid_from date: {contract.valid_from}"
                )
            seen.add(contract.valid_from)
        return tuple(sorted(v, key=lambda c: c.valid_from))

    @property
    def full_name(self) -> str:
        """Display name."""
        return f"{self.first_name} {self.last_name}".strip()
