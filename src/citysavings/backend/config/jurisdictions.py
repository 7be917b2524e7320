"""Configuration loader wrapping the shared schema models."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError

from .schema import (
    CityCatalogue,
    CitySeed,
    ConfigurationError,
    DeductionComponent,
    JurisdictionRule,
    JurisdictionTable,
    SalaryFactors,
    TaxBracket,
    normalise_city_name,
)

CONFIG_DIR_ENV = "CITYSAVINGS_CONFIG_DIR"

CONFIG_DIRECTORY = Path(
    os.getenv(CONFIG_DIR_ENV) or Path(__file__).resolve().parent / "data"
)
JURISDICTIONS_FILENAME = "jurisdictions.yaml"
CITIES_FILENAME = "cities.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Configuration file missing: {path.name}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


@lru_cache(maxsize=1)
def load_jurisdiction_table() -> JurisdictionTable:
    """Load and cache the jurisdiction rule table."""

    raw_table = _load_yaml(CONFIG_DIRECTORY / JURISDICTIONS_FILENAME)

    try:
        return JurisdictionTable.model_validate(raw_table)
    except ValidationError as error:
        raise ConfigurationError(f"Jurisdiction table validation failed: {error}") from error


@lru_cache(maxsize=1)
def load_city_catalogue() -> CityCatalogue:
    """Load and cache the city seed catalogue used to build the base roster."""

    raw_catalogue = _load_yaml(CONFIG_DIRECTORY / CITIES_FILENAME)

    try:
        return CityCatalogue.model_validate(raw_catalogue)
    except ValidationError as error:
        raise ConfigurationError(f"City catalogue validation failed: {error}") from error


def resolve_jurisdiction(city_name: str) -> JurisdictionRule:
    """Return the rule applying to ``city_name`` (the default when unmatched)."""

    return load_jurisdiction_table().rule_for_city(city_name)


def jurisdiction_ids() -> Sequence[str]:
    """Return the configured rule identifiers in declaration order."""

    return tuple(rule.id for rule in load_jurisdiction_table().rules)


def clear_caches() -> None:
    """Drop cached configuration so the next access re-reads from disk."""

    load_jurisdiction_table.cache_clear()
    load_city_catalogue.cache_clear()


__all__ = [
    "CITIES_FILENAME",
    "CONFIG_DIRECTORY",
    "CONFIG_DIR_ENV",
    "CityCatalogue",
    "CitySeed",
    "ConfigurationError",
    "DeductionComponent",
    "JURISDICTIONS_FILENAME",
    "JurisdictionRule",
    "JurisdictionTable",
    "SalaryFactors",
    "TaxBracket",
    "clear_caches",
    "jurisdiction_ids",
    "load_city_catalogue",
    "load_jurisdiction_table",
    "normalise_city_name",
    "resolve_jurisdiction",
]
