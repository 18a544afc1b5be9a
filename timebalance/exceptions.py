# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exception hierarchy for the time balance engine."""


class TimeBalanceError(Exception):
    """Base exception for time balance engine errors."""


class AbsenceTransitionError(TimeBalanceError):
    """An absence request cannot move to the requested status."""


class HolidayProviderError(TimeBalanceError):
    """Holidays could not be obtained from the provider."""
