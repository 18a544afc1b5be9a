# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Timesheet export data API endpoints."""

from fastapi import APIRouter, Depends

from timebalance.api.deps import get_holiday_provider, resolve_holidays, years_for
from timebalance.schemas import TimesheetSummary, TimesheetSummaryRequest
from timebalance.services.holiday_provider import HolidayProvider
from timebalance.services.timesheet_service import build_timesheet_summary

router = APIRouter()


@router.post("/summary", response_model=TimesheetSummary)
def get_timesheet_summary(
    data: TimesheetSummaryRequest,
    provider: HolidayProvider = Depends(get_holiday_provider),
) -> TimesheetSummary:
    """Get the figures a monthly timesheet is rendered from."""
    snapshot = data.snapshot
    holidays_by_year = resolve_holidays(snapshot, years_for(snapshot, data.year), provider)
    return build_timesheet_summary(
        snapshot.employee,
        data.year,
        data.month,
        snapshot.time_entries,
        snapshot.absence_requests,
        snapshot.adjustments,
        holidays_by_year,
    )
