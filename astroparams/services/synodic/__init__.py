"""
Synodic Period Service.

    POST /api/synodic/solve  {"P": 1.0, "Q": 1.881}
    POST /api/synodic/solve  {"Q": 1.881, "S": 2.135, "branch": "inner"}

Equal sidereal periods return {"sentinel": "no_conjunction", ...}; a
branch with no positive root returns {"sentinel": "undefined", ...}.
Both are status 200.
"""

from flask import request

from astroparams import synodic
from astroparams.engine import serialize
from astroparams.services import (
    AstroService,
    optional_number,
    precision_option,
    require_payload,
)


class SynodicService(AstroService):

    id = "synodic"
    name = "Synodic Periods"
    description = "Sidereal and synodic periods of two orbiting bodies"
    category = "orbital"
    status = "live"
    route = "/api/synodic"

    def validate(self, config):
        config = require_payload(config)
        periods = {key: optional_number(config, key) for key in ("P", "Q", "S")}
        given = [key for key, value in periods.items() if value is not None]
        if len(given) != 2:
            raise ValueError(
                "Supply exactly two of P, Q, S (got {})".format(
                    ", ".join(given) or "none"))
        branch = config.get("branch")
        periods["branch"] = None if branch is None else synodic.SynodicBranch.coerce(branch)
        periods["precision"] = precision_option(config, None)
        return periods

    def compute(self, config):
        return serialize(synodic.solve_synodic(**config))

    def register_routes(self, bp):
        """Register synodic endpoints on the given blueprint."""
        service = self

        @bp.route("/synodic/solve", methods=["POST"])
        def synodic_solve():
            return service.respond(request.get_json(silent=True))
