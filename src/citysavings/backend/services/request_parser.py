"""Helpers for normalising incoming JSON requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest


def _merge_query_defaults(req: Request, payload: dict[str, Any]) -> None:
    """Fill role selection fields from the query string when the body omits them."""

    if "role_key" in payload or "role" in payload:
        return

    role_key = req.args.get("role_key")
    if role_key:
        payload["role_key"] = role_key
        return

    role = req.args.get("role")
    experience = req.args.get("experience")
    if role and experience:
        payload["role"] = role
        payload["experience"] = experience


def parse_json_payload(req: Request, *, role_from_query: bool = False) -> dict[str, Any]:
    """Extract and validate a JSON object payload from ``req``.

    With ``role_from_query`` the role selection may also come from the query
    string, which lets the map keep one URL per role while posting anchors.
    """

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    payload = dict(data)
    if role_from_query:
        _merge_query_defaults(req, payload)

    return payload
