"""
Service layer: AstroService ABC and ServiceRegistry.

Each solver domain (spectral classification, stellar scaling, orbits,
synodic periods, habitability) is an AstroService registered with the
ServiceRegistry. The registry provides lightweight dependency
injection: services are looked up by ID at runtime, and each service
owns its own API endpoints, config validation, and result format.

Classes:
    AstroService    - Abstract base class for all solver services
    ServiceRegistry - Central lookup container for registered services

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
from abc import ABC, abstractmethod

from flask import jsonify

from astroparams.errors import require_number, require_precision

log = logging.getLogger(__name__)


def require_payload(config):
    """Reject anything that is not a JSON object."""
    if not isinstance(config, dict):
        raise ValueError("Request body must be a JSON object")
    return config


def optional_number(config, key):
    """Finite float for ``key`` if present and not null, else None."""
    value = config.get(key)
    if value is None:
        return None
    return require_number(value, key)


def precision_option(config, default):
    """Normalized 'precision' entry, falling back to ``default``."""
    if "precision" not in config:
        return default
    return require_precision(config["precision"])


class AstroService(ABC):
    """
    One solver exposed over HTTP.

    A service turns a raw JSON payload into solver arguments (validate),
    runs the solver (compute) and mounts its endpoints under ``route``.
    Solver sentinels are returned in the payload, never as errors.

    Class Attributes
    ----------------
    id : str
        Registry key (e.g. "spectral", "orbit").
    name : str
        Display name for /api/services.
    description : str
        One-liner for /api/services.
    category : str
        "stellar" or "orbital".
    status : str
        "live" services are mounted; "disabled" ones are only listed.
    route : str
        URL prefix of the service's endpoints (e.g. "/api/orbit").
    """

    id = ""
    name = ""
    description = ""
    category = ""
    status = "live"
    route = ""

    @abstractmethod
    def validate(self, config):
        """
        Check a request payload and return the solver arguments.

        Raises ValueError (usually an AstroValidationError) for a payload
        the solver cannot accept; respond() turns that into HTTP 400.
        """

    @abstractmethod
    def compute(self, config):
        """Run the solver on validated arguments and return a JSON-ready dict."""

    @abstractmethod
    def register_routes(self, blueprint):
        """
        Mount the service's endpoints (e.g. /api/orbit/solve) on the
        /api blueprint.
        """

    def respond(self, payload, validate=None, compute=None):
        """
        Validate a request payload, compute, and build the response.

        Validation and solver errors (ValueError) become HTTP 400 with
        {"error": message}. Sentinel results are ordinary 200 responses.

        Parameters
        ----------
        payload : dict or None
            Parsed JSON body.
        validate, compute : callable, optional
            Override self.validate / self.compute for endpoints that take
            a different config shape.
        """
        validate = validate or self.validate
        compute = compute or self.compute
        try:
            config = validate(payload)
            result = compute(config)
        except ValueError as e:
            log.warning("%s request rejected: %s", self.id, e)
            return jsonify({"error": str(e)}), 400
        return jsonify(result)

    def metadata(self):
        """
        Return service metadata for the registry listing.

        Returns
        -------
        dict
            Service info: id, name, description, category, status, route.
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "status": self.status,
            "route": self.route,
        }


class ServiceRegistry:
    """
    Solver services keyed by id, in registration order.

    create_app() fills one registry per application; /api/services lists
    it and only the live entries get their routes mounted.
    """

    def __init__(self):
        self._services = {}

    def register(self, service):
        """
        Register a service instance.

        Parameters
        ----------
        service : AstroService
            The service to register. Must have a unique id.

        Raises
        ------
        ValueError
            If a service with the same id is already registered.
        """
        if service.id in self._services:
            raise ValueError(
                "Service '{}' is already registered".format(service.id)
            )
        self._services[service.id] = service

    def get(self, service_id):
        """
        Look up a service by id.

        Parameters
        ----------
        service_id : str
            The service identifier.

        Returns
        -------
        AstroService or None
            The service, or None if not found.
        """
        return self._services.get(service_id)

    def list_all(self):
        """
        Return metadata for all registered services.

        Returns
        -------
        list of dict
            One metadata dict per service, in registration order.
        """
        return [s.metadata() for s in self._services.values()]

    def live(self):
        """
        Return all services with status 'live'.

        Returns
        -------
        list of AstroService
            Live service instances.
        """
        return [s for s in self._services.values()
                if s.status == "live"]
