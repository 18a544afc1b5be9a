# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence request API endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from timebalance.exceptions import AbsenceTransitionError
from timebalance.models import AbsenceRequest
from timebalance.schemas import AbsenceValidationRequest, AbsenceValidationResult
from timebalance.services.absence_validation import validate_absence_request

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/validate", response_model=AbsenceValidationResult)
def validate_absence(data: AbsenceValidationRequest) -> AbsenceValidationResult:
    """Check a candidate absence range for conflicts."""
    return validate_absence_request(
        data.employee_id,
        data.start_date,
        data.end_date,
        data.existing_requests,
        data.time_entries,
        exclude_id=data.exclude_id,
    )


@router.post("/approve", response_model=AbsenceRequest)
def approve_absence(data: AbsenceRequest) -> AbsenceRequest:
    """Approve a pending absence request."""
    try:
        approved = data.approve()
    except AbsenceTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    logger.info(f"Approved absence request {data.id} of employee {data.employee_id}")
    return approved


@router.post("/reject", response_model=AbsenceRequest)
def reject_absence(data: AbsenceRequest) -> AbsenceRequest:
    """Reject a pending absence request."""
    try:
        rejected = data.reject()
    except AbsenceTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    logger.info(f"Rejected absence request {data.id} of employee {data.employee_id}")
    return rejected
