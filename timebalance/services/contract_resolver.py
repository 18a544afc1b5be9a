# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Resolve the contract version effective on a given date."""

import logging
from datetime import date, datetime

from timebalance.models import Contract, Employee, EmploymentType, TargetHoursModel

logger = logging.getLogger(__name__)

# Returned when an employee has no contract history at all
PLACEHOLDER_CONTRACT = Contract(
    valid_from=date(1970, 1, 1),
    employment_type=EmploymentType.FULL_TIME,
    monthly_target_hours=0.0,
    daily_target_hours=0.0,
    vacation_days_per_year=0.0,
    target_hours_model=TargetHoursModel.MONTHLY,
)


def get_contract_for_date(employee: Employee, target: date | datetime) -> Contract:
    """Find the contract version active for an employee on a date.

    The active version is the one with the latest ``valid_from`` on or
    before the target date. Dates before the earliest version fall back to
    that earliest version.

    Args:
        employee: Employee with its contract history.
        target: Date to resolve for; the time of day is ignored.

    Returns:
        The effective contract, or a zero-valued placeholder when the
        employee has no contract history.
    """
    if isinstance(target, datetime):
        target = target.date()

    history = employee.contract_history
    if not history:
        logger.error(f"Employee {employee.id} has no contract history")
        return PLACEHOLDER_CONTRACT

    # History is sorted ascending by valid_from
    for contract in reversed(history):
        if contract.valid_from <= target:
            return contract
    return history[0]
