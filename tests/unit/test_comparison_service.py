"""Unit tests for the payload-level comparison service."""

from __future__ import annotations

import pytest

from citysavings.backend.app.models import ArbitrageRequest, NetSalaryRequest, RoleKey
from citysavings.backend.app.services.comparison_service import (
    compare_cities,
    describe_jurisdictions,
    estimate_net_salary,
    list_cities,
    resolve_role_key,
)


def test_estimate_net_salary_accepts_models_and_mappings() -> None:
    from_mapping = estimate_net_salary({"monthly_gross": 6000, "city": "Warsaw"})
    from_model = estimate_net_salary(NetSalaryRequest(monthly_gross=6000, city="Warsaw"))

    assert from_mapping == from_model
    assert from_mapping["net_monthly"] == 4780
    assert from_mapping["jurisdiction"] == "poland"


def test_estimate_net_salary_rejects_non_mapping() -> None:
    with pytest.raises(ValueError, match="mapping"):
        estimate_net_salary(["Warsaw", 6000])  # type: ignore[arg-type]


def test_estimate_net_salary_rejects_nan() -> None:
    with pytest.raises(ValueError, match="Invalid request payload"):
        estimate_net_salary({"monthly_gross": float("nan"), "city": "Berlin"})


@pytest.mark.parametrize(
    ("role", "experience", "expected"),
    [
        (None, None, "average_average"),
        ("", "", "average_average"),
        ("Designer", " junior ", "designer_junior"),
    ],
)
def test_resolve_role_key(role, experience, expected) -> None:
    assert str(resolve_role_key(role, experience)) == expected


def test_resolve_role_key_requires_both_parts() -> None:
    with pytest.raises(ValueError):
        resolve_role_key("designer", None)


def test_arbitrage_request_role_resolution() -> None:
    assert ArbitrageRequest().resolved_role_key() == RoleKey.average()
    assert ArbitrageRequest(role_key="devops_mid").resolved_role_key() == RoleKey.parse(
        "devops_mid"
    )
    assert (
        str(ArbitrageRequest(role="designer", experience="lead").resolved_role_key())
        == "designer_lead"
    )


def test_compare_cities_reports_anchor_meta(berlin_warsaw_roster) -> None:
    result = compare_cities(
        {
            "nomad_mode": True,
            "mode": "home",
            "anchor": "Berlin",
            "cities": [city.to_payload() for city in berlin_warsaw_roster],
        }
    )

    assert result["meta"] == {
        "nomad_mode": True,
        "mode": "home",
        "anchor": "Berlin",
        "anchor_found": True,
    }
    warsaw = result["cities"][1]
    assert warsaw["savings"]["average_average"] == 4400 - 1500 - 1200
    assert (warsaw["rent"], warsaw["living"]) == (1500, 1200)


def test_compare_cities_without_nomad_mode_is_pass_through(berlin_warsaw_roster) -> None:
    cities = [city.to_payload() for city in berlin_warsaw_roster]

    result = compare_cities({"anchor": "Berlin", "cities": cities})

    assert result["cities"] == cities


def test_list_cities_matches_default_comparison() -> None:
    assert list_cities()["cities"] == compare_cities({})["cities"]


def test_describe_jurisdictions_preserves_rule_order() -> None:
    assert [rule["id"] for rule in describe_jurisdictions()][-1] == "europe_average"
