"""Geometric (ray) optics solvers.

This module provides closed-form models for thin lenses and mirrors,
two-lens systems, plane-parallel slabs and prisms, plus principal-ray
geometry for drawing ray diagrams.

Example:
    >>> from opticore.geometric import SingleOptic, solve_single_optic
    >>>
    >>> optic = SingleOptic(object_distance=150, focal_length=100)
    >>> res = solve_single_optic(optic)
    >>> res.image_distance, res.nature.value
    (300.0, 'Real')
"""

# Configuration
from .optics import (
    OpticKind,
    OpticShape,
    SingleOptic,
    TwoLensSystem,
    Slab,
    Prism,
)

# Imaging
from .imaging import (
    FOCAL_EPSILON,
    ImageNature,
    Orientation,
    ImagingCase,
    ImagingResult,
    thin_lens_image_distance,
    solve_single_optic,
    solve_slab_shift,
)
from .compound import (
    CompoundCase,
    TwoLensResult,
    solve_two_lens_system,
    effective_focal_length,
)

# Refraction
from .prism import (
    RefractionStage,
    PrismResult,
    solve_prism,
)

# Ray diagrams
from .rays import (
    DEFAULT_VIEW_LIMIT,
    RaySegment,
    trace_single_optic,
    trace_two_lens,
    trace_slab,
)

__all__ = [
    # Configuration
    "OpticKind",
    "OpticShape",
    "SingleOptic",
    "TwoLensSystem",
    "Slab",
    "Prism",
    # Imaging
    "FOCAL_EPSILON",
    "ImageNature",
    "Orientation",
    "ImagingCase",
    "ImagingResult",
    "thin_lens_image_distance",
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
    "DEFAULT_VIEW_LIMIT",
    "RaySegment",
    "trace_single_optic",
    "trace_two_lens",
    "trace_slab",
]
