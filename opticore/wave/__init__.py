"""Wave optics: slit diffraction and interference patterns.

Example:
    >>> import numpy as np
    >>> from opticore.wave import SlitConfig, sample_diffraction_intensity
    >>>
    >>> cfg = SlitConfig.from_lab_units(
    ...     wavelength_nm=532, slit_width_um=10, slit_separation_um=40
    ... )
    >>> y = np.linspace(-0.075, 0.075, 512)  # 15 cm screen
    >>> intensity = sample_diffraction_intensity(cfg, y)
"""

from .slits import (
    SlitMode,
    SlitConfig,
    DEFAULT_SEPARATION_MARGIN,
    clamp_slit_separation,
)
from .diffraction import (
    diffraction_intensity,
    sample_diffraction_intensity,
    IntensityProfile,
    fringe_spacing,
    first_minimum_position,
    wavelength_to_hue,
)

__all__ = [
    # Configuration
    "SlitMode",
    "SlitConfig",
    "DEFAULT_SEPARATION_MARGIN",
    "clamp_slit_separation",
    # Intensity
    "diffraction_intensity",
    "sample_diffraction_intensity",
    "IntensityProfile",
    "fringe_spacing",
    "first_minimum_position",
    "wavelength_to_hue",
]
