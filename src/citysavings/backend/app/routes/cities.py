"""REST endpoints exposing the city roster and its arbitrage variants."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from citysavings.backend.services import (
    build_json_response,
    compare_cities,
    list_cities,
    parse_json_payload,
)

blueprint = Blueprint("cities", __name__, url_prefix="/api/v1")


@blueprint.get("/cities")
def get_cities() -> tuple[Any, int]:
    """Return the base roster for the optional ``role``/``experience`` query."""

    payload = list_cities(request.args.get("role"), request.args.get("experience"))
    return build_json_response(payload)


@blueprint.post("/arbitrage")
def create_arbitrage_roster() -> tuple[Any, int]:
    """Return the composite roster for the submitted anchor selection."""

    payload = parse_json_payload(request, role_from_query=True)
    return build_json_response(compare_cities(payload))
