"""REST endpoints for net salary estimates."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from citysavings.backend.services import (
    build_json_response,
    estimate_net_salary,
    parse_json_payload,
)

blueprint = Blueprint("salaries", __name__, url_prefix="/api/v1/salaries")


@blueprint.post("/net")
def create_net_salary_estimate() -> tuple[Any, int]:
    """Estimate net salary and deductions for the submitted gross and city."""

    payload = parse_json_payload(request)
    return build_json_response(estimate_net_salary(payload))
