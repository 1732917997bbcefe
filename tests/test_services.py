"""
Tests for the service layer: registry behaviour and each service's
validate() / compute() contract, independent of HTTP.
"""

import pytest
from flask import Blueprint

from astroparams.api.routes import create_api_blueprint
from app import create_registry
from astroparams.errors import UnknownModeError
from astroparams.scaling import StellarMode
from astroparams.services import AstroService, ServiceRegistry
from astroparams.services.habitability import HabitabilityService
from astroparams.services.orbit import OrbitService
from astroparams.services.spectral import SpectralService
from astroparams.services.stellar import StellarService
from astroparams.services.synodic import SynodicService


class _StubService(AstroService):
    id = "stub"
    name = "Stub"
    status = "disabled"

    def validate(self, config):
        return config

    def compute(self, config):
        return config

    def register_routes(self, blueprint):
        raise AssertionError("disabled services are not mounted")


class TestRegistry:

    def test_all_services_registered(self):
        registry = create_registry()
        ids = [s["id"] for s in registry.list_all()]
        assert ids == ["spectral", "stellar", "orbit", "synodic", "habitability"]

    def test_all_live(self):
        assert len(create_registry().live()) == 5

    def test_duplicate_rejected(self):
        registry = ServiceRegistry()
        registry.register(_StubService())
        with pytest.raises(ValueError):
            registry.register(_StubService())

    def test_get(self):
        registry = create_registry()
        assert isinstance(registry.get("orbit"), OrbitService)
        assert registry.get("missing") is None

    def test_disabled_not_live(self):
        registry = ServiceRegistry()
        registry.register(_StubService())
        assert registry.live() == []

    def test_default_status_is_live(self):
        class Minimal(_StubService):
            status = AstroService.status
        assert Minimal().metadata()["status"] == "live"

    def test_disabled_listed_but_not_mounted(self):
        registry = ServiceRegistry()
        registry.register(_StubService())
        assert isinstance(create_api_blueprint(registry), Blueprint)
        assert registry.list_all()[0]["status"] == "disabled"

    def test_metadata_keys(self):
        meta = SpectralService().metadata()
        assert set(meta) == {"id", "name", "description", "category", "status", "route"}
        assert meta["route"] == "/api/spectral"


class TestSpectralService:

    def setup_method(self):
        self.service = SpectralService()

    def test_label(self):
        config = self.service.validate({"label": "G7.3"})
        assert self.service.compute(config)["temperature"] == pytest.approx(5529)

    def test_temperature(self):
        config = self.service.validate({"temperature": 5529})
        assert self.service.compute(config)["spectral_class"] == "G7.3"

    @pytest.mark.parametrize("payload", [
        {}, {"label": "G2", "temperature": 5770}, {"label": 7}, {"temperature": "hot"}, None, [],
    ])
    def test_invalid(self, payload):
        with pytest.raises(ValueError):
            self.service.validate(payload)


class TestStellarService:

    def setup_method(self):
        self.service = StellarService()

    def test_defaults(self):
        config = self.service.validate({"mode": "m", "value": 1.0})
        assert config["mode"] is StellarMode.M
        assert config["precision"] == 6

    def test_compute(self):
        config = self.service.validate({"mode": "K", "value": 5770})
        result = self.service.compute(config)
        assert result["given"] == "K"
        assert result["L"] == pytest.approx(1.0)

    def test_sentinel(self):
        config = self.service.validate({"mode": "V", "value": 0})
        assert self.service.compute(config)["sentinel"] == "undefined"

    def test_unknown_mode(self):
        with pytest.raises(UnknownModeError):
            self.service.validate({"mode": "Z", "value": 1.0})

    def test_missing_value(self):
        with pytest.raises(ValueError):
            self.service.validate({"mode": "K"})


class TestOrbitService:

    def setup_method(self):
        self.service = OrbitService()

    def test_solve(self):
        config = self.service.validate({"mass": 1.0, "axis": 4.0})
        assert self.service.compute(config)["period"] == pytest.approx(8.0)

    def test_needs_two(self):
        with pytest.raises(ValueError):
            self.service.validate({"mass": 1.0})

    def test_configuration(self):
        payload = {"mass1": 2.0, "mass2": 1.0, "axis1": 1.0, "axis2": 1.0}
        config = self.service.validate_configuration(payload)
        assert self.service.compute_configuration(config)["index"] == 2.0

    def test_configuration_missing(self):
        with pytest.raises(ValueError):
            self.service.validate_configuration({"mass1": 1.0})


class TestSynodicService:

    def setup_method(self):
        self.service = SynodicService()

    def test_solve(self):
        config = self.service.validate({"P": 1.0, "Q": 2.0})
        assert self.service.compute(config)["S"] == 2.0

    def test_no_conjunction(self):
        config = self.service.validate({"P": 1.0, "Q": 1.0})
        assert self.service.compute(config)["sentinel"] == "no_conjunction"

    def test_branch(self):
        config = self.service.validate({"Q": 1.0, "S": 2.0, "branch": "OUTER"})
        assert self.service.compute(config)["P"] == pytest.approx(2.0)

    def test_bad_branch(self):
        with pytest.raises(ValueError):
            self.service.validate({"Q": 1.0, "S": 2.0, "branch": "middle"})


class TestHabitabilityService:

    def setup_method(self):
        self.service = HabitabilityService()

    def test_index(self):
        config = self.service.validate({"orbital_distance": 2.5})
        result = self.service.compute(config)
        assert result["index"] == 1.628
        assert result["zone"] == "outer"
        assert result["nucleal_radius"] == 1.0

    def test_uninhabitable(self):
        config = self.service.validate({"orbital_distance": 0.25})
        result = self.service.compute(config)
        assert result["sentinel"] == "uninhabitable"
        assert "index" not in result

    def test_missing_distance(self):
        with pytest.raises(ValueError):
            self.service.validate({"nucleal_radius": 1.0})
