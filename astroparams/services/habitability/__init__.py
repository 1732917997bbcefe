"""
Habitability Index Service.

    POST /api/habitability/index
        {"orbital_distance": 2.5, "nucleal_radius": 1.0, "precision": 3}

Response: {"index": 1.628, "zone": "outer", ...}. Uninhabitable
positions return {"sentinel": "uninhabitable", "zone": "uninhabitable"}
with status 200, and a distance too large for a float index returns
{"sentinel": "undefined", "zone": "undefined"}.
"""

from flask import request

from astroparams import habitability
from astroparams.constants import HABITABILITY_PRECISION
from astroparams.results import is_sentinel
from astroparams.services import (
    AstroService,
    optional_number,
    precision_option,
    require_payload,
)


class HabitabilityService(AstroService):

    id = "habitability"
    name = "Habitability Index"
    description = "Habitability of an orbit relative to the nucleal zone"
    category = "orbital"
    status = "live"
    route = "/api/habitability"

    def validate(self, config):
        config = require_payload(config)
        distance = optional_number(config, "orbital_distance")
        if distance is None:
            raise ValueError("'orbital_distance' is required")
        radius = optional_number(config, "nucleal_radius")
        return {
            "orbital_distance": distance,
            "nucleal_radius": 1.0 if radius is None else radius,
            "precision": precision_option(config, HABITABILITY_PRECISION),
        }

    def compute(self, config):
        index = habitability.habitability_index(
            config["orbital_distance"],
            config["nucleal_radius"],
            precision=config["precision"],
        )
        result = {
            "orbital_distance": config["orbital_distance"],
            "nucleal_radius": config["nucleal_radius"],
            "zone": habitability.habitability_zone(index),
        }
        if is_sentinel(index):
            result.update(index.to_dict())
        else:
            result["index"] = index
        return result

    def register_routes(self, bp):
        """Register habitability endpoints on the given blueprint."""
        service = self

        @bp.route("/habitability/index", methods=["POST"])
        def habitability_index():
            return service.respond(request.get_json(silent=True))
