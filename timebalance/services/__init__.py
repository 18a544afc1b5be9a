"""Services package."""
from timebalance.services import (
    absence_classifier,
    absence_validation,
    balance_service,
    breakdown_service,
    contract_resolver,
    entitlement_service,
    formatting,
    holiday_provider,
    schedule,
    timesheet_service,
)

__all__ = [
    "absence_classifier",
    "absence_validation",
    "balance_service",
    "breakdown_service",
    "contract_resolver",
    "entitlement_service",
    "formatting",
    "holiday_provider",
    "schedule",
    "timesheet_service",
]
