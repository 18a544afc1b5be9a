# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Regional public holiday lookup."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

import holidays

from timebalance.exceptions import HolidayProviderError
from timebalance.models import Holiday, HolidaysByYear

logger = logging.getLogger(__name__)


class HolidayProvider(ABC):
    """Source of public holidays for a year and region."""

    @abstractmethod
    def get_holidays(self, year: int, region: str | None = None) -> list[Holiday]:
        """Return the public holidays of a year, ordered by date."""
        ...


class HolidaysLibProvider(HolidayProvider):
    """Holiday provider backed by the ``holidays`` package.

    Regions are the package's subdivision codes (e.g. "BY" for Bavaria).
    """

    def __init__(self, country_code: str = "DE", default_region: str | None = None) -> None:
        """Initialize the provider.

        Args:
            country_code: ISO 3166-1 alpha-2 country code.
            default_region: Subdivision used when a lookup names none.
        """
        self.country_code = country_code
        self.default_region = default_region

    def get_holidays(self, year: int, region: str | None = None) -> list[Holiday]:
        """Get public holidays for a year.

        Args:
            year: The year.
            region: Optional subdivision code.

        Returns:
            Holidays ordered by date.

        Raises:
            HolidayProviderError: If the country or region is unknown.
        """
        subdiv = region or self.default_region
        try:
            calendar = holidays.country_holidays(
                self.country_code, subdiv=subdiv, years=year
            )
        except NotImplementedError as e:
            logger.error(
                f"No holiday data for country={self.country_code} region={subdiv}: {e}"
            )
            raise HolidayProviderError(
                f"Unsupported holiday region: {self.country_code}/{subdiv}"
            ) from e

        return [
            Holiday(date=day, name=name) for day, name in sorted(calendar.items())
        ]


def years_touched(first: int, last: int) -> list[int]:
    """Years from ``first`` to ``last`` inclusive."""
    return list(range(first, last + 1))


def ensure_holiday_years(
    holidays_by_year: HolidaysByYear | None,
    years: Iterable[int],
    provider: HolidayProvider,
    region: str | None = None,
) -> dict[int, list[Holiday]]:
    """Return a copy of ``holidays_by_year`` with the missing years filled in.

    Only years absent from the mapping are requested from the provider;
    supplied years are kept as they are.

    Args:
        holidays_by_year: Holidays already known, per year.
        years: Years the calculation needs.
        provider: Provider for the missing years.
        region: Region code passed to the provider.

    Returns:
        New mapping of year to holidays.
    """
    result = {year: list(items) for year, items in (holidays_by_year or {}).items()}
    for year in years:
        if year in result:
            continue
        logger.debug(f"Fetching holidays for {year} (region={region})")
        result[year] = provider.get_holidays(year, region)
    return result
