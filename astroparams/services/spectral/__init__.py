"""
Spectral Classification Service.

Converts between spectral subclass labels and effective temperatures
and serves the reference table.

    POST /api/spectral/temperature  {"label": "G7.3"}
    POST /api/spectral/subclass     {"temperature": 5529}
    GET  /api/spectral/table[?class=G]
"""

from flask import jsonify, request

from astroparams import spectral
from astroparams.errors import InvalidClassError
from astroparams.services import AstroService, optional_number, require_payload


class SpectralService(AstroService):

    id = "spectral"
    name = "Spectral Classification"
    description = "Subclass label to effective temperature and back"
    category = "stellar"
    status = "live"
    route = "/api/spectral"

    def validate(self, config):
        """Exactly one of 'label' or 'temperature'."""
        config = require_payload(config)
        label = config.get("label")
        temperature = optional_number(config, "temperature")
        if (label is None) == (temperature is None):
            raise ValueError("Supply exactly one of 'label' or 'temperature'")
        if label is not None and not isinstance(label, str):
            raise ValueError("'label' must be a string")
        return {"label": label, "temperature": temperature}

    def compute(self, config):
        if config["label"] is not None:
            label = config["label"]
            return {
                "label": label,
                "temperature": spectral.temperature_of(label),
            }
        temperature = config["temperature"]
        return {
            "temperature": temperature,
            "spectral_class": spectral.subclass_of(temperature),
        }

    def validate_label(self, config):
        config = require_payload(config)
        if "label" not in config:
            raise ValueError("'label' is required")
        return self.validate({"label": config["label"]})

    def validate_temperature(self, config):
        config = require_payload(config)
        if config.get("temperature") is None:
            raise ValueError("'temperature' is required")
        return self.validate({"temperature": config["temperature"]})

    def register_routes(self, bp):
        """Register spectral API endpoints on the given blueprint."""
        service = self

        @bp.route("/spectral/temperature", methods=["POST"])
        def spectral_temperature():
            return service.respond(request.get_json(silent=True),
                                   validate=service.validate_label)

        @bp.route("/spectral/subclass", methods=["POST"])
        def spectral_subclass():
            return service.respond(request.get_json(silent=True),
                                   validate=service.validate_temperature)

        @bp.route("/spectral/table", methods=["GET"])
        def spectral_table():
            class_filter = request.args.get("class")
            try:
                rows = spectral.display(class_filter)
            except InvalidClassError as e:
                return jsonify({"error": str(e)}), 400
            if class_filter is not None:
                return jsonify({"class": class_filter.strip().upper(), "rows": rows})
            return jsonify({"classes": list(rows), "table": rows})
