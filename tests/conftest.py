"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from citysavings.backend.app import create_app  # noqa: E402
from citysavings.backend.app.models import CityRecord  # noqa: E402


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def berlin_warsaw_roster() -> tuple[CityRecord, ...]:
    """Two-city roster with hand-checked average figures."""

    return (
        CityRecord.model_validate(
            {
                "name": "Berlin",
                "lat": 52.52,
                "lng": 13.405,
                "salaryGross": {"average_average": 5600},
                "salaryNet": {"average_average": 3800, "software_engineer_mid": 3500},
                "rent": 1500,
                "living": 1200,
                "savings": {"average_average": 1100, "software_engineer_mid": 800},
                "sunshine": 1626,
            }
        ),
        CityRecord.model_validate(
            {
                "name": "Warsaw",
                "lat": 52.2297,
                "lng": 21.0122,
                "salaryGross": {"average_average": 5800},
                "salaryNet": {"average_average": 4400, "software_engineer_mid": 4000},
                "rent": 1100,
                "living": 800,
                "savings": {"average_average": 2500, "software_engineer_mid": 2100},
                "sunshine": 1573,
            }
        ),
    )
