# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Per-day classification of holidays and approved absences."""

import logging
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from timebalance.models import AbsenceRequest, AbsenceType, DayKind

logger = logging.getLogger(__name__)

HALF_DAY_FRACTION = 0.5

_ABSENCE_KINDS = {
    AbsenceType.VACATION: DayKind.VACATION,
    AbsenceType.SICK_LEAVE: DayKind.SICK_LEAVE,
    AbsenceType.TIME_OFF: DayKind.TIME_OFF,
}

# Day kinds that earn hour credit; time off is recorded but unpaid
_CREDITED_KINDS = frozenset({DayKind.HOLIDAY, DayKind.VACATION, DayKind.SICK_LEAVE})


@dataclass(frozen=True)
class DayClassification:
    """What covers a calendar day, and which share of the day it covers."""

    kind: DayKind
    fraction: float = 0.0
    absence: AbsenceRequest | None = None

    @property
    def earns_credit(self) -> bool:
        """True if the day is credited with scheduled hours."""
        return self.kind in _CREDITED_KINDS


NO_ABSENCE = DayClassification(kind=DayKind.NONE)
HOLIDAY = DayClassification(kind=DayKind.HOLIDAY, fraction=1.0)


def approved_absences_for(
    employee_id: int, absence_requests: Iterable[AbsenceRequest]
) -> list[AbsenceRequest]:
    """Return the employee's approved absences, keeping list order."""
    return [
        r for r in absence_requests if r.employee_id == employee_id and r.is_approved
    ]


def find_covering_absence(
    day: date, absences: Sequence[AbsenceRequest]
) -> AbsenceRequest | None:
    """Return the first absence in list order that covers ``day``.

    Overlapping absences should be prevented when requests are created.
    If several still cover the same day, the first one wins and the
    conflict is logged.
    """
    matches = [a for a in absences if a.covers(day)]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            f"{len(matches)} absences cover {day.isoformat()} for employee "
            f"{matches[0].employee_id}; using the first one"
        )
    return matches[0]


def classify_day(
    day: date,
    absences: Sequence[AbsenceRequest],
    holidays: Collection[date],
) -> DayClassification:
    """Classify a calendar day.

    A public holiday takes precedence over any absence on the same day, so
    a day is never credited twice.

    Args:
        day: Calendar date.
        absences: Approved absences of one employee.
        holidays: Public holiday dates.

    Returns:
        The day's classification.
    """
    if day in holidays:
        return HOLIDAY

    absence = find_covering_absence(day, absences)
    if absence is None:
        return NO_ABSENCE

    fraction = HALF_DAY_FRACTION if absence.is_half_day else 1.0
    return DayClassification(
        kind=_ABSENCE_KINDS[absence.type], fraction=fraction, absence=absence
    )


def day_credit_hours(classification: DayClassification, scheduled_hours: float) -> float:
    """Hours credited for a classified day with the given scheduled hours."""
    if not classification.earns_credit:
        return 0.0
    return scheduled_hours * classification.fraction
