"""WSGI entrypoint for deploying the CitySavings backend."""

from citysavings.backend.app import create_app

# Passenger and most WSGI servers expect a module-level ``application``.
application = create_app()
