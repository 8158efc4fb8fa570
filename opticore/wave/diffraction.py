"""Fraunhofer single/double-slit intensity patterns.

Theory:
    sin(θ) = y / L                     (far field, paraxial)
    β = π a sin(θ) / λ                 diffraction envelope  (sin β / β)²
    α = π d sin(θ) / λ                 interference term     cos² α
    I(y) = (sin β / β)² · cos² α       (cos² α = 1 for a single slit)

The far-field mapping sin(θ) = y/L only holds while the screen distance L
is much larger than the extent of the sampled pattern. Intensities are
normalized so that I(0) = 1.
"""

from typing import Iterator, Tuple, Union

import numpy as np

from .slits import SlitConfig

__all__ = [
    "diffraction_intensity",
    "sample_diffraction_intensity",
    "IntensityProfile",
    "fringe_spacing",
    "first_minimum_position",
    "wavelength_to_hue",
]


def diffraction_intensity(
    config: SlitConfig, y: Union[float, np.ndarray]
) -> Union[float, np.ndarray]:
    """Normalized intensity at transverse screen position(s) y.

    Args:
        config: Slit and screen parameters.
        y: Screen position(s) in metres, scalar or array.

    Returns:
        Intensity in [0, 1], same shape as ``y`` (float for scalar input).
    """
    y_arr = np.asarray(y, dtype=np.float64)
    sin_theta = y_arr / config.screen_distance

    # np.sinc(x) = sin(πx)/(πx) with x = β/π, and sinc(0) = 1 at β = 0
    diffraction = np.sinc(config.slit_width * sin_theta / config.wavelength) ** 2

    if config.is_double:
        alpha = np.pi * config.slit_separation * sin_theta / config.wavelength
        interference = np.cos(alpha) ** 2
    else:
        interference = 1.0

    intensity = diffraction * interference

    if np.ndim(intensity) == 0:
        return float(intensity)
    return intensity


def sample_diffraction_intensity(config: SlitConfig, positions) -> np.ndarray:
    """Evaluate the intensity at caller-chosen screen positions.

    Args:
        config: Slit and screen parameters.
        positions: Sequence or array of screen positions (m).

    Returns:
        1D array of intensities, one per position.

    Example:
        >>> cfg = SlitConfig.from_lab_units(532, 10, 40)
        >>> y = np.linspace(-0.075, 0.075, 400)
        >>> intensity = sample_diffraction_intensity(cfg, y)
    """
    positions = np.atleast_1d(np.asarray(positions, dtype=np.float64))
    return np.asarray(diffraction_intensity(config, positions))


class IntensityProfile:
    """Lazy, restartable sequence of (position, intensity) samples.

    Positions run from ``start`` towards ``stop`` (exclusive) in
    increments of ``step``. Nothing is computed until iteration, and each
    iteration starts over from ``start``.

    Example:
        ```python
        profile = IntensityProfile(cfg, -0.075, 0.075, 1e-4)
        for y, intensity in profile:
            ...
        ```
    """

    def __init__(self, config: SlitConfig, start: float, stop: float, step: float):
        if step == 0:
            raise ValueError("Step must be non-zero")
        if (stop - start) * step < 0:
            raise ValueError(
                f"Step ({step}) does not move from start ({start}) towards stop ({stop})"
            )
        self.config = config
        self.start = float(start)
        self.stop = float(stop)
        self.step = float(step)

    def __len__(self) -> int:
        # (0.1 - 0) / 0.01 evaluates to 10.000000000000002
        n = (self.stop - self.start) / self.step
        return max(0, int(np.ceil(n - 1e-9)))

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for i in range(len(self)):
            y = self.start + i * self.step
            yield y, diffraction_intensity(self.config, y)

    def positions(self) -> np.ndarray:
        """All sample positions as an array."""
        return self.start + np.arange(len(self)) * self.step

    def to_array(self) -> np.ndarray:
        """Intensities for all samples, computed in one vectorized pass."""
        return sample_diffraction_intensity(self.config, self.positions())

    def __repr__(self) -> str:
        return (
            f"IntensityProfile(start={self.start}, stop={self.stop}, "
            f"step={self.step}, n={len(self)})"
        )


def fringe_spacing(config: SlitConfig) -> float:
    """Distance between adjacent bright fringes, Δy = λL/d (double slit)."""
    if not config.is_double:
        raise ValueError("Fringe spacing is only defined for a double slit")
    return config.wavelength * config.screen_distance / config.slit_separation


def first_minimum_position(config: SlitConfig) -> float:
    """Position of the first diffraction minimum, y = λL/a."""
    return config.wavelength * config.screen_distance / config.slit_width


def wavelength_to_hue(wavelength_nm: float) -> float:
    """Map a visible wavelength to an HSL hue in degrees.

    380 nm maps to violet (280°) and 750 nm to red (0°), linearly.
    Wavelengths outside that range are clipped to it.
    """
    wl = float(np.clip(wavelength_nm, 380.0, 750.0))
    return 280.0 - (wl - 380.0) * (280.0 / 370.0)
