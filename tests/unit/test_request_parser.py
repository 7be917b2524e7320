"""Unit tests for request parsing helpers."""

from __future__ import annotations

import pytest
from flask import Flask, request
from werkzeug.exceptions import BadRequest

from citysavings.backend.services.request_parser import parse_json_payload


def test_parse_payload_returns_copy_of_object(app: Flask) -> None:
    body = {"monthly_gross": 5000, "city": "Berlin"}

    with app.test_request_context("/api/v1/salaries/net", method="POST", json=body):
        payload = parse_json_payload(request)

    assert payload == body
    assert payload is not body


def test_parse_payload_reads_role_from_query(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/arbitrage?role=designer&experience=senior",
        method="POST",
        json={"nomad_mode": True, "anchor": "Berlin"},
    ):
        payload = parse_json_payload(request, role_from_query=True)

    assert payload["role"] == "designer"
    assert payload["experience"] == "senior"


def test_parse_payload_prefers_body_role(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/arbitrage?role_key=designer_senior",
        method="POST",
        json={"role_key": "devops_mid"},
    ):
        payload = parse_json_payload(request, role_from_query=True)

    assert payload["role_key"] == "devops_mid"


def test_parse_payload_ignores_query_by_default(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/salaries/net?role_key=designer_senior",
        method="POST",
        json={"monthly_gross": 1000, "city": "Paris"},
    ):
        payload = parse_json_payload(request)

    assert "role_key" not in payload


def test_parse_payload_rejects_non_object(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/salaries/net",
        method="POST",
        json=["not", "an", "object"],
    ):
        with pytest.raises(BadRequest):
            parse_json_payload(request)


def test_parse_payload_rejects_invalid_json(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/salaries/net",
        method="POST",
        data="not-json",
        content_type="text/plain",
    ):
        with pytest.raises(BadRequest):
            parse_json_payload(request)
