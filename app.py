"""
ASTROPARAMS - Astrophysical Parameter Resolution
Flask application factory.

Serves the JSON API for the solvers via registered AstroService
instances.

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI
"""

__version__ = "0.1.0"

import logging

from flask import Flask, jsonify

from astroparams.engine import AstrophysicalParameterEngine
from astroparams.services import ServiceRegistry
from astroparams.services.spectral import SpectralService
from astroparams.services.stellar import StellarService
from astroparams.services.orbit import OrbitService
from astroparams.services.synodic import SynodicService
from astroparams.services.habitability import HabitabilityService


def create_registry():
    """Build and populate the service registry."""
    registry = ServiceRegistry()
    registry.register(SpectralService())
    registry.register(StellarService())
    registry.register(OrbitService())
    registry.register(SynodicService())
    registry.register(HabitabilityService())
    return registry


def create_app(config=None):
    """
    Application factory for the ASTROPARAMS Flask app.

    Parameters
    ----------
    config : dict, optional
        Flask config overrides (e.g. {"TESTING": True}).
    """
    app = Flask(__name__)
    app.json.sort_keys = False
    if config:
        app.config.update(config)

    # Build service registry
    registry = create_registry()

    # Create and register API blueprint (shared + service-owned routes)
    from astroparams.api.routes import create_api_blueprint
    api = create_api_blueprint(registry, AstrophysicalParameterEngine())
    app.register_blueprint(api)

    # Root: service index
    @app.route("/")
    def index():
        return jsonify({
            "name": "astroparams",
            "version": __version__,
            "services": registry.list_all(),
        })

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    app.run(debug=True, host="127.0.0.1", port=5000)
