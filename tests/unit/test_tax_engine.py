"""Unit tests for the net salary and breakdown engine."""

from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from citysavings.backend.app.models import TaxBreakdownItem
from citysavings.backend.app.services.tax_engine import (
    calculate_net_salary,
    get_tax_breakdown,
    resolve_rule,
)

_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "regression_scenarios.json"

NAMED_CITIES = ("London", "Berlin", "Munich", "Amsterdam", "Madrid", "Barcelona", "Warsaw")
OTHER_CITIES = ("Lisbon", "Paris", "Zurich", "Springfield")


@pytest.mark.parametrize(
    "scenario",
    json.loads(_DATA_PATH.read_text("utf-8")),
    ids=lambda item: item["name"],
)
def test_engine_matches_regression_scenario(scenario: dict[str, object]) -> None:
    payload = scenario["payload"]
    expectations = scenario["expectations"]

    assert calculate_net_salary(payload["monthly_gross"], payload["city"]) == (
        expectations["net_monthly"]
    )
    breakdown = get_tax_breakdown(payload["monthly_gross"], payload["city"])
    assert [item.model_dump() for item in breakdown] == expectations["breakdown"]


def test_warsaw_breakdown_items() -> None:
    assert get_tax_breakdown(6000, "Warsaw") == [
        TaxBreakdownItem(label="B2B Flat Income Tax", amount=720),
        TaxBreakdownItem(label="ZUS & Health Contrib.", amount=500),
    ]


@pytest.mark.parametrize("gross", [1000, 3333, 4200, 12345])
@pytest.mark.parametrize("city", OTHER_CITIES)
def test_default_rule_keeps_sixty_five_percent(city: str, gross: int) -> None:
    assert calculate_net_salary(gross, city) == math.floor(gross * 0.65 + 0.5)


@pytest.mark.parametrize("gross", [1000, 2500, 4321, 7777])
@pytest.mark.parametrize("city", ["Madrid", "Barcelona"])
def test_spanish_flat_rate(city: str, gross: int) -> None:
    assert calculate_net_salary(gross, city) == math.floor(gross * 12 * 0.76 / 12 + 0.5)


@pytest.mark.parametrize("city", NAMED_CITIES + OTHER_CITIES)
def test_zero_income_never_goes_negative(city: str) -> None:
    assert calculate_net_salary(0, city) == 0


def test_warsaw_fixed_contribution_is_floored_at_zero() -> None:
    assert calculate_net_salary(0, "Warsaw") == 0
    assert calculate_net_salary(450, "Warsaw") == 0
    assert get_tax_breakdown(0, "Warsaw") == [
        TaxBreakdownItem(label="ZUS & Health Contrib.", amount=500),
    ]


@pytest.mark.parametrize("city", NAMED_CITIES + OTHER_CITIES)
def test_net_salary_is_monotonic_in_gross(city: str) -> None:
    previous = calculate_net_salary(0, city)
    for gross in range(50, 40_001, 50):
        current = calculate_net_salary(gross, city)
        assert current >= previous, f"{city}: net dropped at gross {gross}"
        previous = current


@pytest.mark.parametrize("city", ["berlin", "  BERLIN ", "Berlin\n", "bErLiN"])
def test_city_matching_ignores_case_and_whitespace(city: str) -> None:
    assert calculate_net_salary(5000, city) == 3032
    assert resolve_rule(city).id == "germany"


def test_unknown_city_uses_default_rule() -> None:
    rule = resolve_rule("Atlantis")

    assert rule.default
    assert [item.label for item in get_tax_breakdown(1000, "Atlantis")] == [
        "Estimated Euro Tax"
    ]


def test_amsterdam_lists_ruling_benefit_first() -> None:
    breakdown = get_tax_breakdown(0, "Amsterdam")

    assert breakdown == [TaxBreakdownItem(label="30% Ruling Benefit", amount=0)]


def test_berlin_top_band_applies_wealth_rate() -> None:
    # 300k gross: (66760-11604)*.24 + (277825-66760)*.42 + (300000-277825)*.45
    expected_tax = 13237.44 + 88647.3 + 9978.75
    breakdown = get_tax_breakdown(25_000, "Berlin")

    assert breakdown[0] == TaxBreakdownItem(
        label="German Income Tax", amount=math.floor(expected_tax / 12 + 0.5)
    )
    assert breakdown[1] == TaxBreakdownItem(label="Social Security", amount=5000)


def test_negative_gross_is_clamped_to_zero() -> None:
    assert calculate_net_salary(-500, "Madrid") == 0
    assert get_tax_breakdown(-500, "Madrid") == []


@pytest.mark.parametrize("gross", [math.nan, math.inf, -math.inf])
def test_non_finite_gross_is_rejected(gross: float) -> None:
    with pytest.raises(ValueError):
        calculate_net_salary(gross, "Berlin")
    with pytest.raises(ValueError):
        get_tax_breakdown(gross, "Berlin")


@pytest.mark.parametrize("gross", ["5000", None, True])
def test_non_numeric_gross_is_rejected(gross: object) -> None:
    with pytest.raises(ValueError):
        calculate_net_salary(gross, "Berlin")  # type: ignore[arg-type]


def test_net_salary_returns_int() -> None:
    assert isinstance(calculate_net_salary(5432.1, "London"), int)
    assert all(isinstance(item.amount, int) for item in get_tax_breakdown(5432.1, "London"))
