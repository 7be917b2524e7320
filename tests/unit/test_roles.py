"""Unit tests for composite role keys."""

from __future__ import annotations

import pytest

from citysavings.backend.roles import AVERAGE_ROLE_KEY, Experience, Role, RoleKey


def test_role_key_uses_legacy_string_format() -> None:
    key = RoleKey(Role.SOFTWARE_ENGINEER, Experience.SENIOR)

    assert str(key) == "software_engineer_senior"
    assert RoleKey.parse("software_engineer_senior") == key


def test_average_sentinel() -> None:
    assert AVERAGE_ROLE_KEY == "average_average"
    assert RoleKey.parse("average_average").is_average


@pytest.mark.parametrize("text", ["  DevOps_Lead ", "devops_lead"])
def test_parse_normalises_case_and_whitespace(text: str) -> None:
    assert RoleKey.parse(text) == RoleKey(Role.DEVOPS, Experience.LEAD)


@pytest.mark.parametrize(
    "text",
    ["", "devops", "astronaut_senior", "designer_principal", "average_senior", "designer_average"],
)
def test_parse_rejects_unknown_keys(text: str) -> None:
    with pytest.raises(ValueError):
        RoleKey.parse(text)


def test_plain_strings_are_coerced_to_enums() -> None:
    key = RoleKey("designer", "mid")  # type: ignore[arg-type]

    assert key.role is Role.DESIGNER
    assert key.experience is Experience.MID


def test_concrete_keys_cover_every_combination() -> None:
    keys = RoleKey.concrete_keys()

    assert len(keys) == len(Role.concrete()) * len(Experience.concrete()) == 20
    assert AVERAGE_ROLE_KEY not in {str(key) for key in keys}
