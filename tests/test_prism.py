"""Tests for prism refraction and TIR detection."""

import math

import numpy as np
import pytest

from opticore import Prism, RefractionStage, solve_prism
from opticore.utils import critical_angle, refract, to_degrees, to_radians


class TestAngleHelpers:
    """Tests for the degree/radian and Snell helpers."""

    def test_round_trip(self):
        for deg in (-90.0, -12.5, 0.0, 45.0, 179.0):
            assert np.isclose(to_degrees(to_radians(deg)), deg)

    def test_refract_normal_incidence(self):
        assert refract(1.0, 1.5, 0.0) == 0.0

    def test_refract_tir_returns_none(self):
        assert refract(1.5, 1.0, to_radians(60.0)) is None

    def test_critical_angle_only_towards_lower_index(self):
        assert np.isclose(to_degrees(critical_angle(1.5, 1.0)), 41.8103149)
        assert critical_angle(1.0, 1.5) is None
        assert critical_angle(1.2, 1.2) is None


class TestPrism:
    """Tests for Prism validation."""

    def test_defaults(self):
        prism = Prism()
        assert prism.n_env == 1.0
        assert prism.n_prism == 1.5
        assert prism.apex_angle == 60.0
        assert prism.incident_angle == 45.0

    @pytest.mark.parametrize("apex", [0.0, -10.0, 180.0])
    def test_invalid_apex(self, apex):
        with pytest.raises(ValueError, match="Apex angle"):
            Prism(apex_angle=apex)

    def test_invalid_incident_angle(self):
        with pytest.raises(ValueError, match="Incident angle"):
            Prism(incident_angle=95.0)

    def test_invalid_index(self):
        with pytest.raises(ValueError, match="Refractive indices"):
            Prism(n_prism=0.0)


class TestSolvePrism:
    """Tests for solve_prism."""

    def test_reference_glass_prism(self):
        """n = 1.5 in air, A = 60, θ1 = 45 deviates by about 37.4 degrees."""
        res = solve_prism(Prism(n_env=1.0, n_prism=1.5, apex_angle=60, incident_angle=45))

        theta2 = math.asin(math.sin(math.radians(45)) / 1.5)
        theta3 = math.radians(60) - theta2
        theta4 = math.asin(1.5 * math.sin(theta3))
        expected = math.degrees(math.radians(45) + theta4 - math.radians(60))

        assert res.stage is RefractionStage.COMPLETE
        assert not res.is_tir
        assert np.isclose(res.deviation, expected)
        assert 37.0 < res.deviation < 38.5
        assert np.isclose(res.theta2 + res.theta3, 60.0)

    def test_matched_index_has_no_deviation(self):
        """With no index contrast the ray passes straight through."""
        res = solve_prism(Prism(n_env=1.0, n_prism=1.0, apex_angle=60, incident_angle=0))
        assert res.stage is RefractionStage.COMPLETE
        assert np.isclose(res.theta2, 0.0)
        assert np.isclose(res.theta3, 60.0)
        assert np.isclose(res.theta4, 60.0)
        assert np.isclose(res.deviation, 0.0, atol=1e-12)
        assert res.critical_angle is None

    def test_entry_tir(self):
        """Dense environment around a thin prism reflects at the first face."""
        res = solve_prism(Prism(n_env=1.5, n_prism=1.0, apex_angle=60, incident_angle=60))
        assert res.is_tir
        assert res.stage is RefractionStage.ENTRY
        assert res.theta1 == 60
        assert res.theta2 is None
        assert res.theta3 is None
        assert res.theta4 is None
        assert res.deviation is None
        assert res.critical_angle is None

    def test_exit_tir(self):
        """Normal incidence on a 60° glass prism exceeds the critical angle."""
        res = solve_prism(Prism(n_env=1.0, n_prism=1.5, apex_angle=60, incident_angle=0))
        assert res.is_tir
        assert res.stage is RefractionStage.EXIT
        assert np.isclose(res.theta2, 0.0)
        assert np.isclose(res.theta3, 60.0)
        assert res.theta4 is None
        assert res.deviation is None
        assert res.theta3 > res.critical_angle

    def test_critical_angle_reported(self):
        res = solve_prism(Prism(n_env=1.0, n_prism=1.5))
        assert np.isclose(res.critical_angle, math.degrees(math.asin(1.0 / 1.5)))

    def test_water_environment_reduces_deviation(self):
        air = solve_prism(Prism(n_env=1.0, n_prism=1.5))
        water = solve_prism(Prism(n_env=1.333, n_prism=1.5))
        assert water.deviation < air.deviation

    def test_negative_incidence(self):
        """Rays from the other side of the normal still trace through."""
        res = solve_prism(Prism(n_env=1.0, n_prism=1.5, apex_angle=30, incident_angle=-10))
        assert res.stage is RefractionStage.COMPLETE
        assert res.theta2 < 0
