"""Service-layer helpers for the CitySavings backend."""

from citysavings.backend.app.services.comparison_service import (
    compare_cities,
    describe_jurisdictions,
    estimate_net_salary,
    list_cities,
)

from .request_parser import parse_json_payload
from .response_builder import build_json_response

__all__ = [
    "build_json_response",
    "compare_cities",
    "describe_jurisdictions",
    "estimate_net_salary",
    "list_cities",
    "parse_json_payload",
]
