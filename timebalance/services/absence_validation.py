# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Conflict checks for new or edited absence requests.

These checks support the request workflow; they never approve or reject
anything.
"""

from collections.abc import Iterable
from datetime import date

from timebalance.models import AbsenceRequest, AbsenceStatus, TimeEntry
from timebalance.schemas.balance import AbsenceValidationError, AbsenceValidationResult

INVALID_RANGE = "INVALID_RANGE"
OVERLAPPING_REQUEST = "OVERLAPPING_REQUEST"
TIME_ENTRY_CONFLICT = "TIME_ENTRY_CONFLICT"


def find_overlapping_request(
    employee_id: int,
    start: date,
    end: date,
    existing_requests: Iterable[AbsenceRequest],
    exclude_id: int | None = None,
) -> AbsenceRequest | None:
    """Find an existing, not rejected request overlapping [start, end].

    Args:
        employee_id: The employee ID.
        start: First day of the candidate range.
        end: Last day of the candidate range.
        existing_requests: All absence requests.
        exclude_id: ID of the request being edited, if any.

    Returns:
        The first overlapping request, or None.
    """
    for request in existing_requests:
        if request.employee_id != employee_id:
            continue
        if exclude_id is not None and request.id == exclude_id:
            continue
        if request.status == AbsenceStatus.REJECTED:
            continue
        if request.overlaps(start, end):
            return request
    return None


def find_time_entry_conflict(
    employee_id: int,
    start: date,
    end: date,
    time_entries: Iterable[TimeEntry],
) -> TimeEntry | None:
    """Find a time entry of the employee dated within [start, end]."""
    for entry in time_entries:
        if entry.employee_id == employee_id and start <= entry.work_date <= end:
            return entry
    return None


def validate_absence_request(
    employee_id: int,
    start: date,
    end: date,
    existing_requests: Iterable[AbsenceRequest],
    time_entries: Iterable[TimeEntry],
    exclude_id: int | None = None,
) -> AbsenceValidationResult:
    """Check a candidate absence range against the employee's records.

    Args:
        employee_id: The employee ID.
        start: First day of the candidate range.
        end: Last day of the candidate range.
        existing_requests: All absence requests.
        time_entries: All time entries.
        exclude_id: ID of the request being edited, if any.

    Returns:
        Validation result listing every conflict found.
    """
    if start > end:
        return AbsenceValidationResult(
            is_valid=False,
            errors=[
                AbsenceValidationError(
                    code=INVALID_RANGE,
                    message="Start date must be on or before the end date",
                )
            ],
        )

    errors: list[AbsenceValidationError] = []
    overlap = find_overlapping_request(
        employee_id, start, end, existing_requests, exclude_id=exclude_id
    )
    if overlap is not None:
        errors.append(
            AbsenceValidationError(
                code=OVERLAPPING_REQUEST,
                message=(
                    f"Overlaps the {overlap.status.value} {overlap.type.value} "
                    f"request from {overlap.start_date} to {overlap.end_date}"
                ),
            )
        )

    conflict = find_time_entry_conflict(employee_id, start, end, time_entries)
    if conflict is not None:
        errors.append(
            AbsenceValidationError(
                code=TIME_ENTRY_CONFLICT,
                message=(
                    f"Time entries already exist in this period "
                    f"(first on {conflict.work_date})"
                ),
            )
        )

    return AbsenceValidationResult(is_valid=not errors, errors=errors)
