"""Utilities for validating configuration data and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Callable, Sequence

from citysavings.backend.roles import RoleKey

from .jurisdictions import (
    CityCatalogue,
    ConfigurationError,
    DeductionComponent,
    JurisdictionRule,
    JurisdictionTable,
    load_city_catalogue,
    load_jurisdiction_table,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_rate(scope: str, label: str, value: float) -> list[str]:
    if value < 0 or value > 1:
        return [_format_scope(scope, f"{label} rate {value} must be between 0 and 1")]
    return []


def _validate_component(scope: str, component: DeductionComponent) -> list[str]:
    errors: list[str] = []

    if component.kind == "progressive":
        bounds = [
            bracket.upper_bound
            for bracket in component.brackets
            if bracket.upper_bound is not None
        ]
        if bounds != sorted(bounds) or len(set(bounds)) != len(bounds):
            errors.append(
                _format_scope(scope, "bracket upper bounds must be strictly increasing")
            )
        if any(bracket.upper_bound is None for bracket in component.brackets[:-1]):
            errors.append(
                _format_scope(scope, "only the final bracket may omit an upper bound")
            )
        for index, bracket in enumerate(component.brackets):
            errors.extend(_validate_rate(scope, f"bracket {index}", bracket.rate))
    elif component.kind == "rate" and component.rate is not None:
        errors.extend(_validate_rate(scope, "component", component.rate))
    elif component.kind == "informational":
        if component.rate is not None or component.amount is not None or component.brackets:
            errors.append(
                _format_scope(scope, "informational components cannot deduct amounts")
            )

    return errors


def _validate_rule(rule: JurisdictionRule) -> list[str]:
    scope = f"rules.{rule.id}"
    errors: list[str] = []

    if rule.default and rule.cities:
        errors.append(_format_scope(scope, "the default rule should not list cities"))

    labels = Counter(component.label for component in rule.components)
    duplicates = sorted(label for label, count in labels.items() if count > 1)
    if duplicates:
        errors.append(
            _format_scope(scope, f"duplicate breakdown labels detected: {duplicates}")
        )

    if rule.currency == "EUR" and rule.exchange_rate != 1.0:
        errors.append(_format_scope(scope, "EUR rules must use an exchange rate of 1.0"))

    for component in rule.components:
        errors.extend(_validate_component(f"{scope}.{component.id}", component))

    return errors


def validate_jurisdiction_table(table: JurisdictionTable) -> list[str]:
    """Return human-readable issues detected in ``table``."""

    errors: list[str] = []

    ids = Counter(rule.id for rule in table.rules)
    duplicates = sorted(rule_id for rule_id, count in ids.items() if count > 1)
    if duplicates:
        errors.append(_format_scope("rules", f"duplicate rule ids: {duplicates}"))

    defaults = [rule.id for rule in table.rules if rule.default]
    if len(defaults) != 1:
        errors.append(
            _format_scope("rules", f"exactly one default rule required, found {defaults}")
        )

    seen: dict[str, str] = {}
    for rule in table.rules:
        for city in rule.cities:
            if city in seen:
                errors.append(
                    _format_scope(
                        "rules",
                        f"city '{city}' assigned to both '{seen[city]}' and '{rule.id}'",
                    )
                )
            seen.setdefault(city, rule.id)
        errors.extend(_validate_rule(rule))

    return errors


def validate_city_catalogue(catalogue: CityCatalogue) -> list[str]:
    """Return human-readable issues detected in ``catalogue``."""

    errors: list[str] = []

    names = Counter(city.name for city in catalogue.cities)
    duplicates = sorted(name for name, count in names.items() if count > 1)
    if duplicates:
        errors.append(_format_scope("cities", f"duplicate city names: {duplicates}"))

    for city in catalogue.cities:
        scope = f"cities.{city.name}"
        for key, amount in city.salary_gross.items():
            try:
                role_key = RoleKey.parse(key)
            except ValueError as error:
                errors.append(_format_scope(scope, str(error)))
                continue
            if role_key.is_average:
                errors.append(
                    _format_scope(scope, "the average role key is derived, not declared")
                )
            if amount <= 0:
                errors.append(_format_scope(scope, f"gross for '{key}' must be positive"))

    return errors


_TARGETS: dict[str, Callable[[], list[str]]] = {
    "jurisdictions": lambda: validate_jurisdiction_table(load_jurisdiction_table()),
    "cities": lambda: validate_city_catalogue(load_city_catalogue()),
}


def validate_all(targets: Sequence[str] | None = None) -> dict[str, list[str]]:
    """Validate the configured data files and return issues keyed by target."""

    return {target: _TARGETS[target]() for target in (targets or list(_TARGETS))}


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate jurisdiction rules and the city seed catalogue."
    )
    parser.add_argument(
        "targets",
        nargs="*",
        help=f"Specific files to validate: {', '.join(_TARGETS)} (defaults to all)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    targets = args.targets or list(_TARGETS)
    unknown = [target for target in targets if target not in _TARGETS]
    if unknown:
        parser.error(f"unknown validation targets: {', '.join(unknown)}")

    exit_code = 0

    for target in targets:
        try:
            issues = _TARGETS[target]()
        except (FileNotFoundError, ConfigurationError) as error:
            print(f"[{target}] failed to load configuration: {error}")
            exit_code = 1
            continue

        if issues:
            exit_code = 1
            print(f"[{target}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{target}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
