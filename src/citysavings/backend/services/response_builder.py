"""Utilities for serialising service responses."""

from __future__ import annotations

from typing import Any, Tuple

from flask import jsonify

ResponseTuple = Tuple[Any, int]


def build_json_response(payload: Any, status: int = 200) -> ResponseTuple:
    """Return a Flask JSON response for a service ``payload``."""

    return jsonify(payload), status
