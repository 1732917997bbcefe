"""
Stellar Scaling Service.

Resolves all solar-relative stellar attributes (K, T, M, R, L, V) from
any one of them.

    POST /api/stellar/resolve  {"mode": "M", "value": 1.2, "precision": 6}

A non-positive value yields {"sentinel": "undefined", ...} with status
200; an unknown mode is a 400.
"""

from flask import request

from astroparams import scaling
from astroparams.constants import STELLAR_PRECISION
from astroparams.engine import serialize
from astroparams.services import (
    AstroService,
    precision_option,
    require_payload,
)


class StellarService(AstroService):

    id = "stellar"
    name = "Stellar Scaling"
    description = "Mass, radius, luminosity and lifetime from any one of them"
    category = "stellar"
    status = "live"
    route = "/api/stellar"

    def validate(self, config):
        config = require_payload(config)
        if "mode" not in config:
            raise ValueError("'mode' is required (one of K, T, M, R, L, V)")
        if "value" not in config:
            raise ValueError("'value' is required")
        return {
            "mode": scaling.StellarMode.coerce(config["mode"]),
            "value": config["value"],
            "precision": precision_option(config, STELLAR_PRECISION),
        }

    def compute(self, config):
        result = scaling.resolve(
            config["mode"], config["value"], precision=config["precision"])
        return serialize(result)

    def register_routes(self, bp):
        """Register stellar scaling endpoints on the given blueprint."""
        service = self

        @bp.route("/stellar/resolve", methods=["POST"])
        def stellar_resolve():
            return service.respond(request.get_json(silent=True))
