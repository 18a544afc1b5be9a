"""Pydantic schemas package."""
from timebalance.schemas.balance import (
    AbsenceValidationError,
    AbsenceValidationResult,
    AnnualEntitlement,
    CarryoverWarning,
    MonthlyAbsenceDays,
    MonthlyBreakdown,
    TimesheetSummary,
)
from timebalance.schemas.common import CamelModel, HealthResponse
from timebalance.schemas.requests import (
    AbsenceValidationRequest,
    AnnualEntitlementRequest,
    BalanceRequest,
    BalanceResponse,
    CarryoverWarningRequest,
    EmployeeSnapshot,
    MonthlyBreakdownRequest,
    TimesheetSummaryRequest,
    YearlyBreakdownRequest,
)

__all__ = [
    "AbsenceValidationError",
    "AbsenceValidationRequest",
    "AbsenceValidationResult",
    "AnnualEntitlement",
    "AnnualEntitlementRequest",
    "BalanceRequest",
    "BalanceResponse",
    "CamelModel",
    "CarryoverWarning",
    "CarryoverWarningRequest",
    "EmployeeSnapshot",
    "HealthResponse",
    "MonthlyAbsenceDays",
    "MonthlyBreakdown",
    "MonthlyBreakdownRequest",
    "TimesheetSummary",
    "TimesheetSummaryRequest",
    "YearlyBreakdownRequest",
]
