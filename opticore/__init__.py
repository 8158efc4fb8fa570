"""opticore - Optics computation core for interactive teaching labs.

Closed-form models for geometric optics (thin lenses and mirrors,
two-lens systems, slabs, prisms), wave optics (single and double slit
patterns) and a LaTeX-to-Unicode equation renderer.

The library is organized into three main modules:

- **geometric**: Imaging, refraction and principal-ray geometry
- **wave**: Diffraction/interference intensity (NumPy)
- **text**: Equation normalizer and reference equation catalog

Every solver is a pure function of an immutable configuration object,
so results can be recomputed freely on each parameter change.

Example:
    >>> from opticore import SingleOptic, solve_single_optic
    >>> from opticore import Prism, solve_prism, normalize_equation
    >>>
    >>> res = solve_single_optic(SingleOptic(object_distance=50, focal_length=100))
    >>> res.image_distance, res.nature.value, res.orientation.value
    (-100.0, 'Virtual', 'Upright')
    >>>
    >>> solve_prism(Prism(n_env=1.0, n_prism=1.5, apex_angle=60, incident_angle=45)).is_tir
    False
    >>> normalize_equation(r"x^{2}")
    'x²'
"""

__version__ = "0.1.0"

# =============================================================================
# Geometric optics
# =============================================================================
from .geometric import (
    # Configuration
    OpticKind,
    OpticShape,
    SingleOptic,
    TwoLensSystem,
    Slab,
    Prism,
    # Imaging
    ImageNature,
    Orientation,
    ImagingCase,
    ImagingResult,
    solve_single_optic,
    solve_slab_shift,
    CompoundCase,
    TwoLensResult,
    solve_two_lens_system,
    effective_focal_length,
    # Refraction
    RefractionStage,
    PrismResult,
    solve_prism,
    # Ray diagrams
    RaySegment,
    trace_single_optic,
    trace_two_lens,
    trace_slab,
)

# =============================================================================
# Wave optics
# =============================================================================
from .wave import (
    SlitMode,
    SlitConfig,
    clamp_slit_separation,
    diffraction_intensity,
    sample_diffraction_intensity,
    IntensityProfile,
    fringe_spacing,
    first_minimum_position,
    wavelength_to_hue,
)

# =============================================================================
# Equation rendering
# =============================================================================
from .text import (
    normalize_equation,
    Topic,
    CatalogEquation,
    EQUATIONS,
    render_catalog,
)

__all__ = [
    # Version
    "__version__",
    # Geometric configuration
    "OpticKind",
    "OpticShape",
    "SingleOptic",
    "TwoLensSystem",
    "Slab",
    "Prism",
    # Imaging
    "ImageNature",
    "Orientation",
    "ImagingCase",
    "ImagingResult",
    "solve_single_optic",
    "solve_slab_shift",
    "CompoundCase",
    "TwoLensResult",
    "solve_two_lens_system",
    "effective_focal_length",
    # Refraction
    "RefractionStage",
    "PrismResult",
    "solve_prism",
    # Ray diagrams
    "RaySegment",
    "trace_single_optic",
    "trace_two_lens",
    "trace_slab",
    # Wave optics
    "SlitMode",
    "SlitConfig",
    "clamp_slit_separation",
    "diffraction_intensity",
    "sample_diffraction_intensity",
    "IntensityProfile",
    "fringe_spacing",
    "first_minimum_position",
    "wavelength_to_hue",
    # Equation rendering
    "normalize_equation",
    "Topic",
    "CatalogEquation",
    "EQUATIONS",
    "render_catalog",
]
