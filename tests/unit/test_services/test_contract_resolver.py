# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for contract_resolver."""

import logging
from datetime import date, datetime

from timebalance.models import Employee
from timebalance.services.contract_resolver import (
    PLACEHOLDER_CONTRACT,
    get_contract_for_date,
)


class TestGetContractForDate:
    """Tests for get_contract_for_date."""

    def test_picks_latest_version_on_or_before_date(self, employee_factory, contract_factory):
        """The latest valid_from not after the date wins."""
        first = contract_factory(valid_from=date(2024, 1, 1))
        second = contract_factory(valid_from=date(2024, 7, 1), monthly_target_hours=80)
        employee = employee_factory(contracts=[second, first])

        assert get_contract_for_date(employee, date(2024, 6, 30)) == first
        assert get_contract_for_date(employee, date(2024, 7, 1)) == second
        assert get_contract_for_date(employee, date(2025, 1, 1)) == second

    def test_date_before_first_version_uses_earliest(self, employee_factory, contract_factory):
        """Dates before every version fall back to the earliest one."""
        first = contract_factory(valid_from=date(2024, 3, 1))
        employee = employee_factory(contracts=[first])

        assert get_contract_for_date(employee, date(2023, 12, 31)) == first

    def test_accepts_datetime(self, employee_factory, contract_factory):
        """The time of day is ignored."""
        first = contract_factory(valid_from=date(2024, 1, 1))
        second = contract_factory(valid_from=date(2024, 7, 1))
        employee = employee_factory(contracts=[first, second])

        assert get_contract_for_date(employee, datetime(2024, 7, 1, 0, 0)) == second

    def test_empty_history_returns_placeholder(self, caplog):
        """Without contracts a zero-valued placeholder is returned and logged."""
        employee = Employee(id=9)

        with caplog.at_level(logging.ERROR):
            contract = get_contract_for_date(employee, date(2024, 1, 1))

        assert contract is PLACEHOLDER_CONTRACT
        assert contract.monthly_target_hours == 0
        assert contract.daily_target_hours == 0
        assert contract.vacation_days_per_year == 0
        assert "no contract history" in caplog.text
