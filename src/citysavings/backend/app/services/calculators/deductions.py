"""Apply a jurisdiction rule's deduction components to an annual gross."""

from __future__ import annotations

from dataclasses import dataclass

from citysavings.backend.config.jurisdictions import DeductionComponent, JurisdictionRule

from .utils import calculate_progressive_tax


@dataclass(frozen=True)
class DeductionLine:
    """A single deduction converted back to annual EUR."""

    component_id: str
    label: str
    annual_amount: float
    informational: bool = False


@dataclass(frozen=True)
class RuleAssessment:
    """Annual figures produced by applying one rule to one gross salary."""

    rule_id: str
    annual_gross: float
    annual_net: float
    lines: tuple[DeductionLine, ...]


def calculate_component(component: DeductionComponent, local_gross: float) -> float:
    """Return the annual deduction of ``component`` in the rule's currency."""

    base = local_gross * component.base_share

    if component.kind == "progressive":
        return calculate_progressive_tax(base, component.brackets)
    if component.kind == "rate":
        if base <= component.threshold:
            return 0.0
        return (base - component.threshold) * (component.rate or 0.0)
    if component.kind == "fixed":
        return component.amount or 0.0
    return 0.0


def assess_rule(annual_gross: float, rule: JurisdictionRule) -> RuleAssessment:
    """Deduct every component of ``rule`` from ``annual_gross`` (EUR).

    Amounts are computed in the rule's local currency and converted back with
    the same fixed exchange rate, so the net is not floored here.
    """

    local_gross = annual_gross / rule.exchange_rate
    local_net = local_gross
    lines: list[DeductionLine] = []

    for component in rule.components:
        local_amount = calculate_component(component, local_gross)
        local_net -= local_amount
        lines.append(
            DeductionLine(
                component_id=component.id,
                label=component.label,
                annual_amount=local_amount * rule.exchange_rate,
                informational=component.kind == "informational",
            )
        )

    return RuleAssessment(
        rule_id=rule.id,
        annual_gross=annual_gross,
        annual_net=local_net * rule.exchange_rate,
        lines=tuple(lines),
    )


__all__ = ["DeductionLine", "RuleAssessment", "assess_rule", "calculate_component"]
