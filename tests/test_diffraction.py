"""Tests for slit diffraction and interference intensity."""

import numpy as np
import pytest

from opticore import (
    IntensityProfile,
    SingleOptic,
    SlitConfig,
    SlitMode,
    clamp_slit_separation,
    diffraction_intensity,
    first_minimum_position,
    fringe_spacing,
    sample_diffraction_intensity,
    wavelength_to_hue,
)


@pytest.fixture
def double_slit():
    """Green laser through 10 μm slits 40 μm apart, screen at 1 m."""
    return SlitConfig.from_lab_units(
        wavelength_nm=532, slit_width_um=10, slit_separation_um=40
    )


@pytest.fixture
def single_slit():
    return SlitConfig.from_lab_units(wavelength_nm=650, slit_width_um=20, mode="single")


class TestSlitConfig:
    """Tests for SlitConfig dataclass."""

    def test_from_lab_units(self, double_slit):
        assert np.isclose(double_slit.wavelength, 532e-9)
        assert np.isclose(double_slit.slit_width, 10e-6)
        assert np.isclose(double_slit.slit_separation, 40e-6)
        assert double_slit.screen_distance == 1.0
        assert double_slit.mode is SlitMode.DOUBLE

    def test_single_slit_needs_no_separation(self, single_slit):
        assert single_slit.slit_separation is None
        assert not single_slit.is_double

    def test_separation_must_exceed_width(self):
        with pytest.raises(ValueError, match="must exceed"):
            SlitConfig(wavelength=500e-9, slit_width=10e-6, slit_separation=10e-6)
        with pytest.raises(ValueError, match="must exceed"):
            SlitConfig(wavelength=500e-9, slit_width=10e-6, slit_separation=5e-6)

    def test_double_slit_requires_separation(self):
        with pytest.raises(ValueError, match="requires a slit separation"):
            SlitConfig(wavelength=500e-9, slit_width=10e-6)

    def test_invalid_wavelength(self):
        with pytest.raises(ValueError, match="Wavelength"):
            SlitConfig(wavelength=0, slit_width=10e-6, mode="single")

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown SlitMode 'triple'"):
            SlitConfig(wavelength=500e-9, slit_width=10e-6, mode="triple")

    def test_unknown_mode_message_matches_optic_enums(self):
        """Slit and optic configs report bad enum values the same way."""
        with pytest.raises(ValueError) as slit_err:
            SlitConfig(wavelength=500e-9, slit_width=10e-6, mode="triple")
        with pytest.raises(ValueError) as optic_err:
            SingleOptic(object_distance=100, kind="prism")
        assert str(slit_err.value) == (
            "Unknown SlitMode 'triple'. Use one of 'single', 'double'."
        )
        assert str(optic_err.value) == (
            "Unknown OpticKind 'prism'. Use one of 'lens', 'mirror'."
        )


class TestClampSlitSeparation:
    """Tests for clamp_slit_separation."""

    def test_valid_separation_unchanged(self):
        assert clamp_slit_separation(10e-6, 40e-6) == 40e-6

    def test_too_small_separation_clamped(self):
        assert np.isclose(clamp_slit_separation(10e-6, 10e-6), 15e-6)
        assert np.isclose(clamp_slit_separation(10e-6, 2e-6, margin=1e-6), 11e-6)

    def test_separation_within_margin_raised(self):
        """Anything below width + margin is pushed up, not only d <= a."""
        assert np.isclose(clamp_slit_separation(10e-6, 12e-6), 15e-6)
        assert np.isclose(clamp_slit_separation(10e-6, 14.9e-6), 15e-6)
        assert clamp_slit_separation(10e-6, 16e-6) == 16e-6

    def test_clamped_value_builds_valid_config(self):
        d = clamp_slit_separation(20e-6, 5e-6)
        cfg = SlitConfig(wavelength=500e-9, slit_width=20e-6, slit_separation=d)
        assert cfg.slit_separation > cfg.slit_width

    def test_margin_must_be_positive(self):
        with pytest.raises(ValueError, match="Margin"):
            clamp_slit_separation(10e-6, 5e-6, margin=0)


class TestDiffractionIntensity:
    """Tests for diffraction_intensity and sample_diffraction_intensity."""

    @pytest.mark.parametrize("wavelength_nm", [400, 532, 700])
    @pytest.mark.parametrize("width_um,sep_um", [(5, 6), (10, 40), (50, 200)])
    def test_central_maximum_is_one(self, wavelength_nm, width_um, sep_um):
        for mode in ("single", "double"):
            cfg = SlitConfig.from_lab_units(wavelength_nm, width_um, sep_um, mode=mode)
            assert diffraction_intensity(cfg, 0.0) == 1.0

    def test_scalar_input_returns_float(self, double_slit):
        assert isinstance(diffraction_intensity(double_slit, 0.01), float)

    def test_single_slit_minima(self, single_slit):
        """Zeros at y = m λ L / a."""
        y_min = first_minimum_position(single_slit)
        ys = np.array([1, 2, 3, -1, -2]) * y_min
        assert np.allclose(diffraction_intensity(single_slit, ys), 0.0, atol=1e-12)

    def test_double_slit_dark_fringes(self, double_slit):
        """cos² term vanishes half way between bright fringes."""
        dy = fringe_spacing(double_slit)
        ys = (np.arange(3) + 0.5) * dy
        assert np.allclose(diffraction_intensity(double_slit, ys), 0.0, atol=1e-12)

    def test_double_slit_within_envelope(self, double_slit):
        envelope = SlitConfig(
            wavelength=double_slit.wavelength,
            slit_width=double_slit.slit_width,
            screen_distance=double_slit.screen_distance,
            mode="single",
        )
        y = np.linspace(-0.075, 0.075, 1001)
        double = sample_diffraction_intensity(double_slit, y)
        single = sample_diffraction_intensity(envelope, y)
        assert np.all(double <= single + 1e-12)

    def test_intensity_bounded(self, double_slit):
        y = np.linspace(-0.2, 0.2, 2001)
        intensity = sample_diffraction_intensity(double_slit, y)
        assert np.all(intensity >= 0.0)
        assert np.all(intensity <= 1.0 + 1e-12)

    def test_symmetric(self, double_slit):
        y = np.linspace(0.0, 0.075, 200)
        assert np.allclose(
            sample_diffraction_intensity(double_slit, y),
            sample_diffraction_intensity(double_slit, -y),
        )

    def test_sample_accepts_sequence(self, single_slit):
        out = sample_diffraction_intensity(single_slit, [0.0, 0.01, 0.02])
        assert out.shape == (3,)
        assert out[0] == 1.0

    def test_matches_closed_form(self, double_slit):
        y = 0.0123
        s = y / double_slit.screen_distance
        beta = np.pi * double_slit.slit_width * s / double_slit.wavelength
        alpha = np.pi * double_slit.slit_separation * s / double_slit.wavelength
        expected = (np.sin(beta) / beta) ** 2 * np.cos(alpha) ** 2
        assert np.isclose(diffraction_intensity(double_slit, y), expected)


class TestIntensityProfile:
    """Tests for the lazy (position, intensity) sequence."""

    def test_length(self, single_slit):
        assert len(IntensityProfile(single_slit, 0.0, 0.1, 0.01)) == 10
        assert len(IntensityProfile(single_slit, 0.1, 0.0, -0.02)) == 5

    def test_restartable(self, double_slit):
        profile = IntensityProfile(double_slit, -0.01, 0.01, 0.001)
        first = list(profile)
        second = list(profile)
        assert first == second
        assert len(first) == len(profile)

    def test_iteration_matches_vectorized(self, double_slit):
        profile = IntensityProfile(double_slit, -0.05, 0.05, 0.0025)
        ys, values = zip(*profile)
        assert np.allclose(ys, profile.positions())
        assert np.allclose(values, profile.to_array())

    def test_lazy(self, double_slit):
        """Nothing is computed until iteration."""
        profile = IntensityProfile(double_slit, 0.0, 1e6, 1e-6)
        y0, i0 = next(iter(profile))
        assert y0 == 0.0
        assert i0 == 1.0

    def test_invalid_step(self, double_slit):
        with pytest.raises(ValueError, match="non-zero"):
            IntensityProfile(double_slit, 0.0, 1.0, 0.0)
        with pytest.raises(ValueError, match="does not move"):
            IntensityProfile(double_slit, 0.0, 1.0, -0.1)


class TestPatternHelpers:
    """Tests for fringe spacing, minima and colour mapping."""

    def test_fringe_spacing(self, double_slit):
        assert np.isclose(fringe_spacing(double_slit), 532e-9 * 1.0 / 40e-6)

    def test_fringe_spacing_single_slit_rejected(self, single_slit):
        with pytest.raises(ValueError, match="double slit"):
            fringe_spacing(single_slit)

    def test_first_minimum(self, single_slit):
        assert np.isclose(first_minimum_position(single_slit), 650e-9 / 20e-6)

    def test_wavelength_to_hue(self):
        assert wavelength_to_hue(380) == 280.0
        assert np.isclose(wavelength_to_hue(750), 0.0)
        assert wavelength_to_hue(300) == 280.0
        assert 0.0 < wavelength_to_hue(532) < 280.0
