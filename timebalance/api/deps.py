# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Iterable

from fastapi import Depends, HTTPException, status

from timebalance.config import Settings, get_settings
from timebalance.exceptions import HolidayProviderError
from timebalance.models import Holiday
from timebalance.schemas import EmployeeSnapshot
from timebalance.services.holiday_provider import (
    HolidayProvider,
    HolidaysLibProvider,
    ensure_holiday_years,
    years_touched,
)


def get_holiday_provider(
    settings: Settings = Depends(get_settings),
) -> HolidayProvider:
    """Get the configured holiday provider."""
    return HolidaysLibProvider(
        country_code=settings.holiday_country,
        default_region=settings.holiday_region,
    )


def resolve_holidays(
    snapshot: EmployeeSnapshot,
    years: Iterable[int],
    provider: HolidayProvider,
) -> dict[int, list[Holiday]]:
    """Fill in holiday years the snapshot does not carry.

    Raises:
        HTTPException: 502 if the provider cannot supply holidays.
    """
    try:
        return ensure_holiday_years(
            snapshot.holidays_by_year, years, provider, region=snapshot.region
        )
    except HolidayProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e


def years_for(snapshot: EmployeeSnapshot, last_year: int) -> list[int]:
    """Holiday years a calculation up to ``last_year`` walks through.

    The walk starts in the year of the employee's first work day.
    """
    first_work_day = snapshot.employee.first_work_day
    first_year = min(first_work_day.year, last_year) if first_work_day else last_year
    return years_touched(first_year, last_year)
