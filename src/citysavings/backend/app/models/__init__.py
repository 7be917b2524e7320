"""Typed models shared across the roster, tax and arbitrage services.

Request and response schemas live in :mod:`.api`; the city record and the
arbitrage mode live in :mod:`.roster`. Role keys are re-exported so routes and
services import every domain type from one place.
"""

from citysavings.backend.roles import AVERAGE_ROLE_KEY, Experience, Role, RoleKey

from .api import (
    ArbitrageRequest,
    JurisdictionSummary,
    NetSalaryRequest,
    NetSalaryResponse,
    RosterMeta,
    RosterResponse,
    TaxBreakdownItem,
    format_validation_error,
)
from .roster import ArbitrageMode, CityRecord

__all__ = [
    "AVERAGE_ROLE_KEY",
    "ArbitrageMode",
    "ArbitrageRequest",
    "CityRecord",
    "Experience",
    "JurisdictionSummary",
    "NetSalaryRequest",
    "NetSalaryResponse",
    "Role",
    "RoleKey",
    "RosterMeta",
    "RosterResponse",
    "TaxBreakdownItem",
    "format_validation_error",
]
