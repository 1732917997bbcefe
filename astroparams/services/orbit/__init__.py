"""
Keplerian Orbit Service.

Solves a^3 = M * P^2 (AU, years, solar masses) for the missing quantity
and computes the two-body configuration index.

    POST /api/orbit/solve                {"mass": 1.0, "period": 1.0}
    POST /api/orbit/configuration-index  {"mass1":, "mass2":, "axis1":, "axis2":}
"""

from flask import request

from astroparams import kepler
from astroparams.services import (
    AstroService,
    optional_number,
    precision_option,
    require_payload,
)

_CONFIGURATION_KEYS = ("mass1", "mass2", "axis1", "axis2")


class OrbitService(AstroService):

    id = "orbit"
    name = "Keplerian Orbits"
    description = "Mass, period or semi-major axis from the other two"
    category = "orbital"
    status = "live"
    route = "/api/orbit"

    def validate(self, config):
        config = require_payload(config)
        quantities = {key: optional_number(config, key)
                      for key in ("mass", "period", "axis")}
        given = [key for key, value in quantities.items() if value is not None]
        if len(given) != 2:
            raise ValueError(
                "Supply exactly two of mass, period, axis (got {})".format(
                    ", ".join(given) or "none"))
        quantities["precision"] = precision_option(config, None)
        return quantities

    def compute(self, config):
        return kepler.solve_orbit(**config).to_dict()

    def validate_configuration(self, config):
        config = require_payload(config)
        missing = [key for key in _CONFIGURATION_KEYS if config.get(key) is None]
        if missing:
            raise ValueError("Missing {}".format(", ".join(missing)))
        return {key: config[key] for key in _CONFIGURATION_KEYS}

    def compute_configuration(self, config):
        result = dict(config)
        result["index"] = kepler.configuration_index(**config)
        return result

    def register_routes(self, bp):
        """Register orbit endpoints on the given blueprint."""
        service = self

        @bp.route("/orbit/solve", methods=["POST"])
        def orbit_solve():
            return service.respond(request.get_json(silent=True))

        @bp.route("/orbit/configuration-index", methods=["POST"])
        def orbit_configuration_index():
            return service.respond(request.get_json(silent=True),
                                   validate=service.validate_configuration,
                                   compute=service.compute_configuration)
