"""Blueprint registrations for application routes."""

from flask import Flask

from .cities import blueprint as cities_blueprint
from .config import blueprint as config_blueprint
from .salaries import blueprint as salaries_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(salaries_blueprint)
    app.register_blueprint(cities_blueprint)
    app.register_blueprint(config_blueprint)
