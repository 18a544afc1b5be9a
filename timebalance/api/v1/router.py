# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from timebalance.api.v1 import absences, balances, entitlements, holidays, timesheets

api_router = APIRouter()

# Balance routes
api_router.include_router(balances.router, prefix="/balances", tags=["balances"])

# Entitlement routes
api_router.include_router(
    entitlements.router, prefix="/entitlements", tags=["entitlements"]
)

# Timesheet routes
api_router.include_router(timesheets.router, prefix="/timesheets", tags=["timesheets"])

# Absence routes
api_router.include_router(absences.router, prefix="/absences", tags=["absences"])

# Holiday routes
api_router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])
