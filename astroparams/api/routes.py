"""
Flask API routes shared by all services.

Endpoints:
  GET  /api/services    - metadata of every registered service
  GET  /api/constants   - calibration constants used by the solvers
  POST /api/resolve     - facade: dispatch on whichever quantities are supplied

Service-owned endpoints (/api/spectral/..., /api/stellar/..., etc.) are
mounted by each live service's register_routes().
"""

import logging

from flask import Blueprint, jsonify, request

from astroparams import constants
from astroparams.engine import AstrophysicalParameterEngine

log = logging.getLogger(__name__)


def create_api_blueprint(registry, engine=None):
    """
    Build the /api blueprint for a service registry.

    A fresh blueprint is created per call so several apps (e.g. one per
    test) can be built in the same process.

    Parameters
    ----------
    registry : ServiceRegistry
        Services whose routes are mounted (live ones only).
    engine : AstrophysicalParameterEngine, optional
        Facade used by /api/resolve. A new one is created if omitted.
    """
    api = Blueprint("api", __name__, url_prefix="/api")
    engine = engine or AstrophysicalParameterEngine()

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for all registered services."""
        return jsonify(registry.list_all())

    @api.route("/constants", methods=["GET"])
    def get_constants():
        """Return the calibration constants used by the solvers."""
        return jsonify({
            "T_SUN": constants.T_SUN,
            "MASS_EXPONENT": constants.MASS_EXPONENT,
            "RADIUS_EXPONENT": constants.RADIUS_EXPONENT,
            "LUMINOSITY_EXPONENT": constants.LUMINOSITY_EXPONENT,
            "LIFETIME_EXPONENT": constants.LIFETIME_EXPONENT,
            "TERMINAL_SPAN": constants.TERMINAL_SPAN,
            "SPECTRAL_CLASSES": list(constants.SPECTRAL_CLASSES),
            "INNER_CURVATURE": constants.INNER_CURVATURE,
            "OUTER_CURVATURE": constants.OUTER_CURVATURE,
            "INNER_FLOOR_RATIO": constants.INNER_FLOOR_RATIO,
            "CONFIGURATION_REFERENCE": constants.CONFIGURATION_REFERENCE,
        })

    @api.route("/resolve", methods=["POST"])
    def resolve():
        """
        Resolve whatever follows from the supplied quantities.

        Request JSON (any one solver's quantities), e.g.:
            {"spectral_class": "G2"}
            {"mass": 1.0, "axis": 1.0}
            {"P": 1.0, "Q": 1.881}
            {"orbital_distance": 0.75}

        Response JSON:
            {"mode": "orbit", "supplied": {...}, "results": {...}}
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        try:
            result = engine.resolve_mapping(data)
        except ValueError as e:
            log.warning("resolve request rejected: %s", e)
            return jsonify({"error": str(e)}), 400
        return jsonify(result.to_dict())

    for service in registry.live():
        service.register_routes(api)

    return api
