# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time balance API endpoints."""

import logging

from fastapi import APIRouter, Depends

from timebalance.api.deps import get_holiday_provider, resolve_holidays, years_for
from timebalance.config import Settings, get_settings
from timebalance.schemas import (
    BalanceRequest,
    BalanceResponse,
    MonthlyBreakdown,
    MonthlyBreakdownRequest,
    YearlyBreakdownRequest,
)
from timebalance.services.balance_service import calculate_balance
from timebalance.services.breakdown_service import (
    calculate_monthly_breakdown,
    calculate_yearly_breakdowns,
)
from timebalance.services.formatting import format_hours
from timebalance.services.holiday_provider import HolidayProvider

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/balance", response_model=BalanceResponse)
def get_balance(
    data: BalanceRequest,
    provider: HolidayProvider = Depends(get_holiday_provider),
    settings: Settings = Depends(get_settings),
) -> BalanceResponse:
    """Calculate an employee's time balance as of a date."""
    snapshot = data.snapshot
    holidays_by_year = resolve_holidays(
        snapshot, years_for(snapshot, data.end_date.year), provider
    )
    balance = calculate_balance(
        snapshot.employee,
        data.end_date,
        snapshot.time_entries,
        snapshot.absence_requests,
        snapshot.adjustments,
        holidays_by_year,
    )
    logger.info(
        f"Balance for employee {snapshot.employee.id} on {data.end_date}: {balance:.2f}h"
    )
    return BalanceResponse(
        employee_id=snapshot.employee.id,
        end_date=data.end_date,
        balance_hours=balance,
        formatted=format_hours(balance, data.time_format or settings.default_time_format),
    )


@router.post("/monthly-breakdown", response_model=MonthlyBreakdown)
def get_monthly_breakdown(
    data: MonthlyBreakdownRequest,
    provider: HolidayProvider = Depends(get_holiday_provider),
) -> MonthlyBreakdown:
    """Get the balance breakdown of a single month."""
    snapshot = data.snapshot
    holidays_by_year = resolve_holidays(snapshot, years_for(snapshot, data.year), provider)
    return calculate_monthly_breakdown(
        snapshot.employee,
        data.year,
        data.month,
        snapshot.time_entries,
        snapshot.absence_requests,
        snapshot.adjustments,
        holidays_by_year,
    )


@router.post("/yearly-breakdown", response_model=list[MonthlyBreakdown])
def get_yearly_breakdown(
    data: YearlyBreakdownRequest,
    provider: HolidayProvider = Depends(get_holiday_provider),
) -> list[MonthlyBreakdown]:
    """Get the balance breakdowns of January to December."""
    snapshot = data.snapshot
    holidays_by_year = resolve_holidays(snapshot, years_for(snapshot, data.year), provider)
    return calculate_yearly_breakdowns(
        snapshot.employee,
        data.year,
        snapshot.time_entries,
        snapshot.absence_requests,
        snapshot.adjustments,
        holidays_by_year,
    )
