"""Tests for two-lens compound systems."""

import math

import numpy as np
import pytest

from opticore import (
    CompoundCase,
    TwoLensSystem,
    effective_focal_length,
    solve_two_lens_system,
)


class TestTwoLensSystem:
    """Tests for TwoLensSystem validation."""

    def test_defaults(self):
        system = TwoLensSystem(object_distance=200)
        assert system.f1 == 100.0
        assert system.f2 == 100.0
        assert system.separation == 300.0

    def test_zero_focal_length_rejected(self):
        with pytest.raises(ValueError, match="non-zero"):
            TwoLensSystem(object_distance=200, f1=0)

    def test_non_positive_separation_rejected(self):
        with pytest.raises(ValueError, match="separation"):
            TwoLensSystem(object_distance=200, separation=0)


class TestSolveTwoLensSystem:
    """Tests for solve_two_lens_system."""

    def test_finite_chain(self):
        """q1 = 300, p2 = 200, q2 = 200, M = (-2)(-1) = 2."""
        res = solve_two_lens_system(
            TwoLensSystem(object_distance=150, f1=100, f2=100, separation=500)
        )
        assert res.case is CompoundCase.FINITE
        assert np.isclose(res.q1, 300.0)
        assert np.isclose(res.p2, 200.0)
        assert np.isclose(res.q2, 200.0)
        assert np.isclose(res.total_magnification, 2.0)

    def test_virtual_object_for_second_lens(self):
        """Intermediate image beyond lens 2 gives a negative p2."""
        res = solve_two_lens_system(
            TwoLensSystem(object_distance=150, f1=100, f2=100, separation=200)
        )
        assert np.isclose(res.p2, -100.0)
        assert np.isclose(res.q2, 50.0)
        assert np.isclose(res.total_magnification, -1.0)

    def test_collimated_beam(self):
        """p1 = f1 gives infinite q1 and the afocal magnification -f2/f1."""
        res = solve_two_lens_system(
            TwoLensSystem(object_distance=100, f1=100, f2=50, separation=300)
        )
        assert res.case is CompoundCase.COLLIMATED
        assert math.isinf(res.q1)
        assert math.isinf(res.p2)
        assert res.q2 == 50.0
        assert res.total_magnification == -0.5
        assert not res.is_unbounded

    def test_final_image_at_infinity(self):
        """Intermediate image in lens 2 focal plane."""
        res = solve_two_lens_system(
            TwoLensSystem(object_distance=200, f1=100, f2=100, separation=300)
        )
        assert res.case is CompoundCase.FINAL_AT_FOCUS
        assert res.is_unbounded
        assert np.isclose(res.q1, 200.0)
        assert np.isclose(res.p2, 100.0)
        assert math.isinf(res.q2)
        assert math.isinf(res.total_magnification)

    def test_diverging_second_lens(self):
        res = solve_two_lens_system(
            TwoLensSystem(object_distance=200, f1=100, f2=-50, separation=100)
        )
        # q1 = 200, p2 = -100, q2 = (-100)(-50)/(-100 + 50) = -100
        assert np.isclose(res.q2, -100.0)
        assert np.isclose(res.total_magnification, -1.0 * -1.0)

    def test_no_nan_results(self):
        for p in (50.0, 100.0, 150.0, 300.0):
            res = solve_two_lens_system(TwoLensSystem(object_distance=p))
            for value in (res.q1, res.p2, res.q2, res.total_magnification):
                assert not math.isnan(value)


class TestEffectiveFocalLength:
    """Tests for effective_focal_length."""

    def test_lenses_in_contact(self):
        """Powers add for d = 0."""
        assert np.isclose(effective_focal_length(100.0, 100.0, 0.0), 50.0)

    def test_afocal_system(self):
        """d = f1 + f2 is a telescope with no net power."""
        assert math.isinf(effective_focal_length(100.0, 100.0, 200.0))

    def test_general(self):
        f = effective_focal_length(100.0, 50.0, 30.0)
        expected = 1.0 / (1 / 100.0 + 1 / 50.0 - 30.0 / 5000.0)
        assert np.isclose(f, expected)
