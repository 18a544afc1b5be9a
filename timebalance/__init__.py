# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working-time balance and vacation entitlement engine."""

__version__ = "0.1.0"
