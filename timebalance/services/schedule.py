# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Daily schedule evaluation and weekly schedule helpers."""

from datetime import date

from timebalance.models import Contract, WeeklySchedule


def is_weekend(day: date) -> bool:
    """Saturday or Sunday."""
    return day.weekday() >= 5


def scheduled_hours_for_day(contract: Contract, day: date) -> float:
    """Return the target hours a contract schedules on a specific day.

    Weekly-model contracts with a schedule use the weekday's configured
    hours, which may be nonzero on weekends. All other contracts schedule
    their flat daily target on Monday to Friday and nothing at weekends.

    Args:
        contract: The contract effective on ``day``.
        day: Calendar date.

    Returns:
        Scheduled hours (0 for non-working days).
    """
    if contract.uses_weekly_schedule:
        return contract.weekly_schedule.hours_for(day)
    if is_weekend(day):
        return 0.0
    return contract.daily_target_hours


def derive_targets_from_weekly_schedule(
    schedule: WeeklySchedule,
) -> tuple[float, float]:
    """Derive monthly and daily target hours from a weekly schedule.

    Monthly target assumes 52 weeks spread over 12 months; the daily target
    is the average over days with scheduled hours.

    Returns:
        Tuple of (monthly_target_hours, daily_target_hours), rounded to
        two decimals.
    """
    weekly_total = schedule.weekly_total
    working_days = schedule.working_days
    monthly = weekly_total * 52 / 12
    daily = weekly_total / working_days if working_days > 0 else 0.0
    return round(monthly, 2), round(daily, 2)
