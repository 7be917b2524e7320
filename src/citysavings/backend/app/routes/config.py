"""Expose configuration metadata consumed by the front-end."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify

from citysavings.backend.config.jurisdictions import jurisdiction_ids
from citysavings.backend.roles import Experience, Role
from citysavings.backend.services import describe_jurisdictions
from citysavings.backend.version import get_project_version

blueprint = Blueprint("config", __name__, url_prefix="/api/v1/config")


def get_configuration_metadata() -> dict[str, Any]:
    """Expose runtime metadata derived from the loaded configuration."""

    return {
        "version": get_project_version(),
        "jurisdictions": list(jurisdiction_ids()),
    }


@blueprint.get("/jurisdictions")
def list_jurisdictions():
    """Return the configured proxy tax rules."""

    return jsonify({"jurisdictions": describe_jurisdictions()}), 200


@blueprint.get("/roles")
def list_roles():
    """Return the selectable roles and experience levels."""

    return (
        jsonify(
            {
                "roles": [role.value for role in Role.concrete()],
                "experience": [level.value for level in Experience.concrete()],
            }
        ),
        200,
    )
