# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence request records and their status lifecycle."""

from datetime import date

from pydantic import model_validator

from timebalance.exceptions import AbsenceTransitionError
from timebalance.models.base import RecordModel
from timebalance.models.enums import AbsenceStatus, AbsenceType, DayPortion


class AbsenceRequest(RecordModel):
    """A vacation, sick leave or time-off request over an inclusive date range.

    Only approved requests take part in balance and entitlement calculations.
    A half-day portion (``am``/``pm``) is only valid on a single-day vacation;
    on sick leave and time off it is ignored and the days count in full.
    """

    id: int | None = None
    employee_id: int
    type: AbsenceType
    status: AbsenceStatus = AbsenceStatus.PENDING
    start_date: date
    end_date: date
    day_portion: DayPortion | None = None

    @model_validator(mode="after")
    def validate_range(self) -> "AbsenceRequest":
        """Check the date range and the half-day constraints."""
        if self.start_date > self.end_date:
            raise ValueError("Absence start_date must be on or before end_date")
        if self.is_half_day and self.start_date != self.end_date:
            raise ValueError("Half-day vacation must cover a single day")
        return self

    @property
    def is_half_day(self) -> bool:
        """True for a morning or afternoon vacation."""
        return (
            self.type == AbsenceType.VACATION
            and self.day_portion is not None
            and self.day_portion != DayPortion.FULL
        )

    @property
    def is_approved(self) -> bool:
        """True once the request has been approved."""
        return self.status == AbsenceStatus.APPROVED

    def covers(self, day: date) -> bool:
        """Check whether ``day`` falls within the request's range."""
        return self.start_date <= day <= self.end_date

    def overlaps(self, start: date, end: date) -> bool:
        """Check whether the request intersects the inclusive range."""
        return self.start_date <= end and start <= self.end_date

    def approve(self) -> "AbsenceRequest":
        """Return an approved copy of this pending request."""
        return self._transition(AbsenceStatus.APPROVED)

    def reject(self) -> "AbsenceRequest":
        """Return a rejected copy of this pending request."""
        return self._transition(AbsenceStatus.REJECTED)

    def ensure_retractable(self) -> None:
        """Raise unless the owner may still retract (remove) this request.

        Raises:
            AbsenceTransitionError: If the request already left pending.
        """
        if self.status != AbsenceStatus.PENDING:
            raise AbsenceTransitionError(
                f"Cannot retract a {self.status.value} absence request"
            )

    def _transition(self, target: AbsenceStatus) -> "AbsenceRequest":
        if self.status != AbsenceStatus.PENDING:
            raise AbsenceTransitionError(
                f"Cannot move absence request from {self.status.value} "
                f"to {target.value}"
            )
        return self.model_copy(update={"status": target})
