"""
Tests for the Flask API endpoints.

Integration tests that validate the REST API returns correct status
codes, JSON structure, and the documented reference values.
"""

import math
import pytest


class TestIndexEndpoints:

    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["name"] == "astroparams"
        assert len(data["services"]) == 5

    def test_services(self, client):
        resp = client.get("/api/services")
        assert resp.status_code == 200
        assert {s["id"] for s in resp.get_json()} == {
            "spectral", "stellar", "orbit", "synodic", "habitability"}

    def test_constants(self, client):
        data = client.get("/api/constants").get_json()
        assert data["T_SUN"] == 5770.0
        assert data["SPECTRAL_CLASSES"] == ["O", "B", "A", "F", "G", "K", "M"]

    def test_two_apps_in_one_process(self):
        """Blueprints are built per app, so repeated factories work."""
        from app import create_app
        first = create_app({"TESTING": True})
        second = create_app({"TESTING": True})
        assert first.test_client().get("/api/services").status_code == 200
        assert second.test_client().get("/api/services").status_code == 200


class TestSpectralEndpoints:

    def test_temperature(self, client):
        resp = client.post("/api/spectral/temperature", json={"label": "O4.4"})
        assert resp.status_code == 200
        assert resp.get_json()["temperature"] == pytest.approx(42300)

    def test_subclass(self, client):
        resp = client.post("/api/spectral/subclass", json={"temperature": 5529})
        assert resp.status_code == 200
        assert resp.get_json()["spectral_class"] == "G7.3"

    def test_invalid_class(self, client):
        resp = client.post("/api/spectral/temperature", json={"label": "X1"})
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_invalid_subclass(self, client):
        resp = client.post("/api/spectral/temperature", json={"label": "G12"})
        assert resp.status_code == 400

    def test_missing_label(self, client):
        resp = client.post("/api/spectral/temperature", json={"temperature": 5000})
        assert resp.status_code == 400

    def test_not_json(self, client):
        resp = client.post("/api/spectral/subclass", data="5529",
                           content_type="text/plain")
        assert resp.status_code == 400

    def test_table(self, client):
        data = client.get("/api/spectral/table").get_json()
        assert data["classes"] == ["O", "B", "A", "F", "G", "K", "M"]
        assert len(data["table"]["G"]) == 10

    def test_table_filter(self, client):
        data = client.get("/api/spectral/table?class=g").get_json()
        assert data["class"] == "G"
        assert data["rows"][7] == {"subclass": "G7", "high_temp": 5550.0, "span": 70.0}

    def test_table_bad_filter(self, client):
        assert client.get("/api/spectral/table?class=W").status_code == 400


class TestStellarEndpoint:

    def test_resolve(self, client):
        resp = client.post("/api/stellar/resolve", json={"mode": "M", "value": 4.0})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["given"] == "M"
        assert data["M"] == 4.0
        assert data["T"] == pytest.approx(2.0)

    def test_undefined(self, client):
        resp = client.post("/api/stellar/resolve", json={"mode": "V", "value": -3})
        assert resp.status_code == 200
        assert resp.get_json()["sentinel"] == "undefined"

    def test_unknown_mode(self, client):
        resp = client.post("/api/stellar/resolve", json={"mode": "Q", "value": 1})
        assert resp.status_code == 400

    def test_string_value_rejected(self, client):
        resp = client.post("/api/stellar/resolve", json={"mode": "M", "value": "1"})
        assert resp.status_code == 400

    def test_no_nan_or_inf(self, client):
        for mode, value in [("K", 3000), ("K", 40000), ("L", 1e5), ("V", 0.01)]:
            data = client.post("/api/stellar/resolve",
                               json={"mode": mode, "value": value}).get_json()
            for key in "KTMRLV":
                assert not math.isnan(data[key])
                assert not math.isinf(data[key])


class TestOrbitEndpoints:

    def test_solve(self, client):
        resp = client.post("/api/orbit/solve", json={"mass": 1.0, "period": 1.0})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["axis"] == pytest.approx(1.0)
        assert data["solved_for"] == "axis"

    def test_precision(self, client):
        resp = client.post("/api/orbit/solve",
                           json={"mass": 1.0, "period": 11.86, "precision": 2})
        assert resp.get_json()["axis"] == 5.2

    def test_non_positive(self, client):
        resp = client.post("/api/orbit/solve", json={"mass": 0, "period": 1.0})
        assert resp.status_code == 400

    def test_three_quantities(self, client):
        resp = client.post("/api/orbit/solve",
                           json={"mass": 1.0, "period": 1.0, "axis": 1.0})
        assert resp.status_code == 400

    def test_configuration_index(self, client):
        resp = client.post("/api/orbit/configuration-index", json={
            "mass1": 1.0, "mass2": 1.0, "axis1": 1.0, "axis2": 1.0})
        assert resp.status_code == 200
        assert resp.get_json()["index"] == 1.0

    def test_configuration_index_invalid(self, client):
        resp = client.post("/api/orbit/configuration-index", json={
            "mass1": 1.0, "mass2": -1.0, "axis1": 1.0, "axis2": 1.0})
        assert resp.status_code == 400

    def test_configuration_index_beyond_float_range(self, client):
        resp = client.post("/api/orbit/configuration-index", json={
            "mass1": 1e-200, "mass2": 1e200, "axis1": 1e200, "axis2": 1e-200})
        assert resp.status_code == 400


class TestSynodicEndpoint:

    def test_solve(self, client):
        resp = client.post("/api/synodic/solve", json={"P": 1.0, "Q": 1.881})
        assert resp.status_code == 200
        assert resp.get_json()["S"] == pytest.approx(2.135, abs=0.001)

    def test_no_conjunction(self, client):
        resp = client.post("/api/synodic/solve", json={"P": 2.0, "Q": 2.0})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["sentinel"] == "no_conjunction"
        assert data["period"] == 2.0

    def test_undefined_branch(self, client):
        resp = client.post("/api/synodic/solve", json={"P": 2.0, "S": 2.0})
        assert resp.status_code == 200
        assert resp.get_json()["sentinel"] == "undefined"

    def test_single_period(self, client):
        resp = client.post("/api/synodic/solve", json={"P": 2.0})
        assert resp.status_code == 400


class TestHabitabilityEndpoint:

    @pytest.mark.parametrize("distance,expected", [
        (1.0, 1.0), (0.75, 0.5), (2.5, 1.628),
    ])
    def test_reference_vectors(self, client, distance, expected):
        resp = client.post("/api/habitability/index",
                           json={"orbital_distance": distance, "nucleal_radius": 1.0})
        assert resp.status_code == 200
        assert resp.get_json()["index"] == expected

    def test_uninhabitable(self, client):
        resp = client.post("/api/habitability/index", json={"orbital_distance": 0.25})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["sentinel"] == "uninhabitable"
        assert data["zone"] == "uninhabitable"

    def test_bad_radius(self, client):
        resp = client.post("/api/habitability/index",
                           json={"orbital_distance": 1.0, "nucleal_radius": 0})
        assert resp.status_code == 400

    def test_distance_beyond_float_range(self, client):
        resp = client.post("/api/habitability/index", json={"orbital_distance": 1e200})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["sentinel"] == "undefined"
        assert data["zone"] == "undefined"


class TestResolveEndpoint:

    def test_spectral(self, client):
        resp = client.post("/api/resolve", json={"spectral_class": "G2"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["mode"] == "spectral"
        assert data["results"]["temperature"] == 5770.0
        assert data["results"]["stellar"]["given"] == "K"

    def test_orbit(self, client):
        data = client.post("/api/resolve", json={"period": 1.0, "axis": 1.0}).get_json()
        assert data["results"]["orbit"]["mass"] == pytest.approx(1.0)

    def test_habitability_sentinel(self, client):
        data = client.post("/api/resolve", json={"orbital_distance": 0.25}).get_json()
        assert data["results"]["index"]["sentinel"] == "uninhabitable"

    def test_unknown_quantities(self, client):
        resp = client.post("/api/resolve", json={"color": "red"})
        assert resp.status_code == 400

    def test_self_key_is_unrecognised(self, client):
        resp = client.post("/api/resolve", json={"self": 1})
        assert resp.status_code == 400
        assert "self" in resp.get_json()["error"]

    def test_stellar_mass_ratio(self, client):
        data = client.post("/api/resolve", json={"mass_ratio": 1.0}).get_json()
        assert data["mode"] == "stellar"
        assert data["results"]["stellar"]["given"] == "M"

    def test_habitability_beyond_float_range(self, client):
        data = client.post("/api/resolve", json={"orbital_distance": 1e200}).get_json()
        assert data["results"]["index"]["sentinel"] == "undefined"
        assert data["results"]["zone"] == "undefined"

    def test_mixed_quantities(self, client):
        resp = client.post("/api/resolve", json={"P": 1.0, "mass": 1.0})
        assert resp.status_code == 400

    def test_not_object(self, client):
        resp = client.post("/api/resolve", json=[1, 2])
        assert resp.status_code == 400
