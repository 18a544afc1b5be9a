# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from timebalance.api.deps import get_holiday_provider
from timebalance.exceptions import HolidayProviderError
from timebalance.models import Holiday
from timebalance.services.holiday_provider import HolidayProvider

router = APIRouter()


@router.get("/{year}", response_model=list[Holiday])
def list_holidays(
    year: int = Path(..., ge=1900, le=2200),
    region: str | None = None,
    provider: HolidayProvider = Depends(get_holiday_provider),
) -> list[Holiday]:
    """List the public holidays of a year."""
    try:
        return provider.get_holidays(year, region)
    except HolidayProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e
