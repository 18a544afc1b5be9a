# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation entitlement API endpoints."""

from fastapi import APIRouter, Depends

from timebalance.api.deps import get_holiday_provider, resolve_holidays
from timebalance.config import Settings, get_settings
from timebalance.schemas import (
    AnnualEntitlement,
    AnnualEntitlementRequest,
    CarryoverWarning,
    CarryoverWarningRequest,
)
from timebalance.services.entitlement_service import (
    calculate_annual_entitlement,
    carryover_deadline,
    check_carryover_warning,
)
from timebalance.services.holiday_provider import HolidayProvider

router = APIRouter()


@router.post("/annual", response_model=AnnualEntitlement)
def get_annual_entitlement(
    data: AnnualEntitlementRequest,
    provider: HolidayProvider = Depends(get_holiday_provider),
) -> AnnualEntitlement:
    """Get vacation entitlement, days taken and sick days for a year."""
    snapshot = data.snapshot
    holidays_by_year = resolve_holidays(snapshot, [data.year], provider)
    return calculate_annual_entitlement(
        snapshot.employee,
        snapshot.absence_requests,
        data.year,
        holidays_by_year[data.year],
        reference_date=data.reference_date,
    )


@router.post("/carryover-warning", response_model=CarryoverWarning)
def get_carryover_warning(
    data: CarryoverWarningRequest,
    settings: Settings = Depends(get_settings),
) -> CarryoverWarning:
    """Check whether carried-over vacation is about to expire."""
    deadline = data.deadline or carryover_deadline(
        data.reference_date.year,
        settings.carryover_deadline_month,
        settings.carryover_deadline_day,
    )
    return check_carryover_warning(data.employee, data.reference_date, deadline)
