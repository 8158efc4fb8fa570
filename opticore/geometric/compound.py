"""Two-lens compound systems."""

import math
from dataclasses import dataclass
from enum import Enum

from .imaging import FOCAL_EPSILON, thin_lens_image_distance
from .optics import TwoLensSystem

__all__ = [
    "CompoundCase",
    "TwoLensResult",
    "solve_two_lens_system",
    "effective_focal_length",
]


class CompoundCase(str, Enum):
    """Outcome of a two-lens calculation.

    FINITE: both images at finite distances.
    COLLIMATED: object at lens 1 focal point, parallel beam between lenses.
    FINAL_AT_FOCUS: intermediate image sits in lens 2 focal plane.
    """

    FINITE = "finite"
    COLLIMATED = "collimated"
    FINAL_AT_FOCUS = "final_at_focus"


@dataclass(frozen=True)
class TwoLensResult:
    """Image chain through two thin lenses.

    Attributes:
        q1: Intermediate image distance from lens 1.
        p2: Object distance for lens 2 (``math.inf`` when collimated).
        q2: Final image distance from lens 2.
        total_magnification: Overall lateral magnification. For a
            collimated beam this is the afocal approximation -f2/f1.
        case: Branch of the model that produced this result.
    """

    q1: float
    p2: float
    q2: float
    total_magnification: float
    case: CompoundCase

    @property
    def is_unbounded(self) -> bool:
        return self.case is CompoundCase.FINAL_AT_FOCUS


def solve_two_lens_system(system: TwoLensSystem) -> TwoLensResult:
    """Trace the image through two thin lenses in sequence.

    Lens 1 sits at position 0, lens 2 at ``system.separation``. The image
    of lens 1 acts as the object of lens 2.

    Args:
        system: Two-lens configuration.

    Returns:
        TwoLensResult with the intermediate and final images.

    Example:
        >>> res = solve_two_lens_system(
        ...     TwoLensSystem(object_distance=200, f1=100, f2=100, separation=300)
        ... )
        >>> res.q1, res.p2, res.q2
        (200.0, 100.0, inf)
    """
    p1 = float(system.object_distance)
    f1 = float(system.f1)
    f2 = float(system.f2)

    q1 = thin_lens_image_distance(p1, f1)

    if math.isinf(q1):
        # Parallel beam into lens 2 focuses in its focal plane; dividing
        # inf/inf would be meaningless so use the afocal approximation.
        return TwoLensResult(
            q1=q1,
            p2=math.inf,
            q2=f2,
            total_magnification=-f2 / f1,
            case=CompoundCase.COLLIMATED,
        )

    p2 = system.separation - q1

    if abs(p2 - f2) < FOCAL_EPSILON:
        return TwoLensResult(
            q1=q1,
            p2=p2,
            q2=math.inf,
            total_magnification=math.inf,
            case=CompoundCase.FINAL_AT_FOCUS,
        )

    q2 = p2 * f2 / (p2 - f2)
    m1 = -q1 / p1
    # Intermediate image exactly on lens 2 passes through unchanged
    m2 = -q2 / p2 if p2 != 0 else 1.0

    return TwoLensResult(
        q1=q1,
        p2=p2,
        q2=q2,
        total_magnification=m1 * m2,
        case=CompoundCase.FINITE,
    )


def effective_focal_length(f1: float, f2: float, separation: float) -> float:
    """Effective focal length of two separated thin lenses.

    1/f_eff = 1/f1 + 1/f2 - d/(f1 f2)

    Args:
        f1: Signed focal length of lens 1.
        f2: Signed focal length of lens 2.
        separation: Lens separation d.

    Returns:
        f_eff, or ``math.inf`` for an afocal system (d = f1 + f2).
    """
    power = 1.0 / f1 + 1.0 / f2 - separation / (f1 * f2)
    if abs(power) < 1e-12:
        return math.inf
    return 1.0 / power
