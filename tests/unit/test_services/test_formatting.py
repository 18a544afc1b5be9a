# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for hour formatting."""

import pytest

from timebalance.models import TimeFormat
from timebalance.services.formatting import format_hours


class TestFormatHours:
    """Tests for format_hours."""

    @pytest.mark.parametrize(
        ("hours", "expected"),
        [
            (8.5, "8h 30m"),
            (0, "0h 00m"),
            (-1.25, "-1h 15m"),
            (7.999, "8h 00m"),
            (160, "160h 00m"),
            (0.375, "0h 23m"),
            (-0.375, "-0h 23m"),
            (1.125, "1h 08m"),
        ],
    )
    def test_hours_minutes(self, hours, expected):
        """Hours and zero-padded minutes with a leading sign."""
        assert format_hours(hours) == expected

    @pytest.mark.parametrize(
        ("hours", "expected"),
        [(8.5, "8,50h"), (-2.125, "-2,12h"), (0, "0,00h"), (float("nan"), "0,00h")],
    )
    def test_decimal(self, hours, expected):
        """Two decimals with a comma separator."""
        assert format_hours(hours, TimeFormat.DECIMAL) == expected
