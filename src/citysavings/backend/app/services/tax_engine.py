"""Net salary and deduction breakdowns for the supported jurisdictions.

Every city is assessed through the rule table in ``jurisdictions.yaml``:
the monthly gross is annualised, the matching rule's components are deducted
in order and the result is brought back to a whole monthly euro figure.
Cities without a dedicated rule use the default European-average proxy,
which is an expected path rather than an error.

Breakdown lines are rounded independently of the net salary, so their sum may
differ from ``gross - net`` by a euro or two.
"""

from __future__ import annotations

import logging
import math
from numbers import Real

from citysavings.backend.app.models import TaxBreakdownItem
from citysavings.backend.config.jurisdictions import (
    JurisdictionRule,
    normalise_city_name,
    resolve_jurisdiction,
)

from .calculators import RuleAssessment, assess_rule, round_currency

_LOGGER = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def _validate_gross(monthly_gross: float) -> float:
    if isinstance(monthly_gross, bool) or not isinstance(monthly_gross, Real):
        raise ValueError("Monthly gross salary must be a number")

    value = float(monthly_gross)
    if not math.isfinite(value):
        raise ValueError("Monthly gross salary must be a finite number")
    if value < 0:
        _LOGGER.debug("Clamping negative monthly gross %s to zero", value)
        return 0.0
    return value


def resolve_rule(city_name: str) -> JurisdictionRule:
    """Return the jurisdiction rule that applies to ``city_name``."""

    rule = resolve_jurisdiction(city_name)
    if rule.default and normalise_city_name(city_name) not in rule.cities:
        _LOGGER.debug("No dedicated rule for %r; using %s", city_name, rule.id)
    return rule


def assess_monthly_gross(monthly_gross: float, city_name: str) -> RuleAssessment:
    """Return the annual assessment for ``monthly_gross`` earned in ``city_name``."""

    gross = _validate_gross(monthly_gross)
    return assess_rule(gross * MONTHS_PER_YEAR, resolve_rule(city_name))


def net_from_assessment(assessment: RuleAssessment) -> int:
    """Return the floored, rounded monthly net of ``assessment``."""

    monthly_net = max(0.0, assessment.annual_net / MONTHS_PER_YEAR)
    return round_currency(monthly_net)


def breakdown_from_assessment(assessment: RuleAssessment) -> list[TaxBreakdownItem]:
    """Return the monthly breakdown lines of ``assessment`` in rule order."""

    items: list[TaxBreakdownItem] = []
    for line in assessment.lines:
        if line.informational:
            items.append(TaxBreakdownItem(label=line.label, amount=0))
        elif line.annual_amount > 0:
            items.append(
                TaxBreakdownItem(
                    label=line.label,
                    amount=round_currency(line.annual_amount / MONTHS_PER_YEAR),
                )
            )
    return items


def calculate_net_salary(monthly_gross: float, city_name: str) -> int:
    """Return the monthly take-home pay in whole euros for ``city_name``."""

    return net_from_assessment(assess_monthly_gross(monthly_gross, city_name))


def get_tax_breakdown(monthly_gross: float, city_name: str) -> list[TaxBreakdownItem]:
    """Return the itemised monthly deductions for ``city_name``."""

    return breakdown_from_assessment(assess_monthly_gross(monthly_gross, city_name))


__all__ = [
    "MONTHS_PER_YEAR",
    "assess_monthly_gross",
    "breakdown_from_assessment",
    "calculate_net_salary",
    "get_tax_breakdown",
    "net_from_assessment",
    "resolve_rule",
]
