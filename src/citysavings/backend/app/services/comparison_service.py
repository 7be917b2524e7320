"""Validate API payloads and route them to the tax and arbitrage services.

Routes hand raw JSON mappings to the functions in this module; validation
failures are converted to ``ValueError`` with a readable message so the
application's error handler can turn them into 400 responses.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from citysavings.backend.app.models import (
    ArbitrageRequest,
    Experience,
    JurisdictionSummary,
    NetSalaryRequest,
    NetSalaryResponse,
    Role,
    RoleKey,
    RosterMeta,
    RosterResponse,
    format_validation_error,
)
from citysavings.backend.config.jurisdictions import load_jurisdiction_table

from .arbitrage import derive_adjusted_roster, find_anchor
from .roster import build_base_roster
from .tax_engine import (
    assess_monthly_gross,
    breakdown_from_assessment,
    net_from_assessment,
    resolve_rule,
)


def _validate(model: type, payload: Mapping[str, Any] | Any) -> Any:
    if isinstance(payload, model):
        return payload
    if not isinstance(payload, Mapping):
        raise ValueError("Payload must be a mapping")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(format_validation_error(exc)) from exc


def estimate_net_salary(payload: Mapping[str, Any] | NetSalaryRequest) -> dict[str, Any]:
    """Return the net salary and breakdown for the submitted gross and city."""

    request: NetSalaryRequest = _validate(NetSalaryRequest, payload)
    rule = resolve_rule(request.city)
    assessment = assess_monthly_gross(request.monthly_gross, request.city)

    response = NetSalaryResponse(
        city=request.city,
        jurisdiction=rule.id,
        jurisdiction_name=rule.name,
        monthly_gross=request.monthly_gross,
        net_monthly=net_from_assessment(assessment),
        breakdown=breakdown_from_assessment(assessment),
    )
    return response.model_dump(mode="json")


def resolve_role_key(role: str | None, experience: str | None) -> RoleKey:
    """Build a role key from optional query values, defaulting to the average."""

    if not role and not experience:
        return RoleKey.average()
    if not role or not experience:
        raise ValueError("role and experience must be provided together")
    return RoleKey(Role(role.strip().lower()), Experience(experience.strip().lower()))


def list_cities(role: str | None = None, experience: str | None = None) -> dict[str, Any]:
    """Return the base roster for the requested role key."""

    role_key = resolve_role_key(role, experience)
    response = RosterResponse(
        role_key=str(role_key),
        cities=list(build_base_roster()),
        meta=RosterMeta(nomad_mode=False, mode="work"),
    )
    return response.model_dump(mode="json", by_alias=True)


def compare_cities(payload: Mapping[str, Any] | ArbitrageRequest) -> dict[str, Any]:
    """Return the composite roster for the submitted anchor selection."""

    request: ArbitrageRequest = _validate(ArbitrageRequest, payload)
    roster = tuple(request.cities) if request.cities is not None else build_base_roster()
    role_key = request.resolved_role_key()

    adjusted = derive_adjusted_roster(
        roster,
        role_key,
        request.nomad_mode,
        request.mode,
        request.anchor,
    )

    response = RosterResponse(
        role_key=str(role_key),
        cities=list(adjusted),
        meta=RosterMeta(
            nomad_mode=request.nomad_mode,
            mode=request.mode,
            anchor=request.anchor or None,
            anchor_found=find_anchor(roster, request.anchor) is not None,
        ),
    )
    return response.model_dump(mode="json", by_alias=True)


def describe_jurisdictions() -> list[dict[str, Any]]:
    """Summarise the configured jurisdiction rules for API consumers."""

    return [
        JurisdictionSummary(
            id=rule.id,
            name=rule.name,
            cities=list(rule.cities),
            default=rule.default,
            currency=rule.currency,
            exchange_rate=rule.exchange_rate,
            components=[component.label for component in rule.components],
        ).model_dump(mode="json")
        for rule in load_jurisdiction_table().rules
    ]


__all__ = [
    "compare_cities",
    "describe_jurisdictions",
    "estimate_net_salary",
    "list_cities",
    "resolve_role_key",
]
