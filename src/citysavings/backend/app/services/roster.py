"""Build the base city roster from the seed catalogue.

Every gross figure is run through the tax engine and the resulting net and
savings maps are stored per role key, together with an ``average_average``
entry taxed on the mean gross of the city.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from citysavings.backend.app.models import AVERAGE_ROLE_KEY, CityRecord, RoleKey
from citysavings.backend.config.jurisdictions import (
    CityCatalogue,
    CitySeed,
    SalaryFactors,
    load_city_catalogue,
)

from .calculators import round_currency
from .tax_engine import calculate_net_salary

_LOGGER = logging.getLogger(__name__)


def expand_gross_salaries(seed: CitySeed, factors: SalaryFactors) -> dict[str, int | float]:
    """Return the monthly gross for every concrete role key of ``seed``."""

    salaries: dict[str, int | float] = {}
    for key in RoleKey.concrete_keys():
        multiplier = factors.roles[key.role] * factors.experience[key.experience]
        salaries[str(key)] = round_currency(seed.base_monthly_gross * multiplier)

    for key, amount in seed.salary_gross.items():
        salaries[str(RoleKey.parse(key))] = amount
    return salaries


def build_city_record(seed: CitySeed, factors: SalaryFactors) -> CityRecord:
    """Compute net salaries and savings for one seed city."""

    salary_gross = expand_gross_salaries(seed, factors)
    salary_net: dict[str, int | float] = {}
    savings: dict[str, int | float] = {}

    for key, gross in salary_gross.items():
        net = calculate_net_salary(gross, seed.name)
        salary_net[key] = net
        savings[key] = net - seed.rent - seed.living

    if salary_gross:
        average_gross = round_currency(sum(salary_gross.values()) / len(salary_gross))
        average_net = calculate_net_salary(average_gross, seed.name)
        salary_gross[AVERAGE_ROLE_KEY] = average_gross
        salary_net[AVERAGE_ROLE_KEY] = average_net
        savings[AVERAGE_ROLE_KEY] = average_net - seed.rent - seed.living

    return CityRecord(
        name=seed.name,
        lat=seed.lat,
        lng=seed.lng,
        salary_gross=salary_gross,
        salary_net=salary_net,
        savings=savings,
        rent=seed.rent,
        living=seed.living,
        sunshine=seed.sunshine,
    )


def build_base_roster(catalogue: CityCatalogue | None = None) -> tuple[CityRecord, ...]:
    """Return the base roster in catalogue order."""

    source = catalogue or load_city_catalogue()
    roster = tuple(build_city_record(seed, source.factors) for seed in source.cities)
    _LOGGER.debug("Built base roster with %d cities", len(roster))
    return roster


def savings_mismatches(roster: Iterable[CityRecord]) -> list[str]:
    """Return ``city:key`` labels whose savings differ from net - rent - living."""

    mismatches: list[str] = []
    for city in roster:
        for key, net in city.salary_net.items():
            if city.savings.get(key) != net - city.rent - city.living:
                mismatches.append(f"{city.name}:{key}")
        for key in city.savings.keys() - city.salary_net.keys():
            mismatches.append(f"{city.name}:{key}")
    return mismatches


__all__ = [
    "build_base_roster",
    "build_city_record",
    "expand_gross_salaries",
    "savings_mismatches",
]
