# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Display formatting for hour values."""

import math

from timebalance.models import TimeFormat


def format_hours(
    hours: float, time_format: TimeFormat = TimeFormat.HOURS_MINUTES
) -> str:
    """Format decimal hours for display.

    Examples:
        8.5 -> "8h 30m" (hours_minutes) or "8,50h" (decimal)
        -1.25 -> "-1h 15m"

    Args:
        hours: Hours as a decimal number.
        time_format: Output format.

    Returns:
        The formatted string.
    """
    if time_format == TimeFormat.DECIMAL:
        if math.isnan(hours):
            return "0,00h"
        return f"{hours:.2f}".replace(".", ",") + "h"

    sign = "-" if hours < 0 else ""
    abs_hours = abs(hours)
    whole = math.floor(abs_hours)
    # Half minutes round up
    minutes = math.floor((abs_hours - whole) * 60 + 0.5)
    if minutes == 60:
        whole += 1
        minutes = 0
    return f"{sign}{whole}h {minutes:02d}m"
