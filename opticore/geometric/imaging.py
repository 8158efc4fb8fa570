"""Thin lens / mirror imaging and slab apparent-depth shift.

Sign convention:
    1/p + 1/q = 1/f

    p > 0 always (real object). f > 0 for converging lenses and concave
    mirrors, f < 0 for diverging lenses and convex mirrors. q > 0 is
    reported as a real image for both lenses and mirrors.

Infinite results (object in the focal plane) are represented by
``math.inf`` and tagged through ``ImagingResult.case``.
"""

import math
from dataclasses import dataclass
from enum import Enum

from .optics import Slab, SingleOptic

__all__ = [
    "FOCAL_EPSILON",
    "ImageNature",
    "Orientation",
    "ImagingCase",
    "ImagingResult",
    "thin_lens_image_distance",
    "solve_single_optic",
    "solve_slab_shift",
]

# Objects closer than this to the focal plane image at infinity.
FOCAL_EPSILON = 0.1


class ImageNature(str, Enum):
    REAL = "Real"
    VIRTUAL = "Virtual"


class Orientation(str, Enum):
    UPRIGHT = "Upright"
    INVERTED = "Inverted"


class ImagingCase(str, Enum):
    """Which branch of the imaging model produced a result."""

    PLANE_MIRROR = "plane_mirror"
    FINITE = "finite"
    AT_FOCUS = "at_focus"


_DESCRIPTIONS = {
    ImageNature.REAL: "Projectable on screen",
    ImageNature.VIRTUAL: "Visible looking into optic",
}


@dataclass(frozen=True)
class ImagingResult:
    """Image formed by a single lens or mirror.

    Attributes:
        image_distance: Signed image distance q (``math.inf`` at focus).
        magnification: Signed lateral magnification m = -q/p
            (``math.inf`` at focus).
        nature: Real or virtual image.
        orientation: Upright or inverted relative to the object.
        focal_length: Signed focal length used (``math.inf`` for plane).
        case: Branch of the model that produced this result.
    """

    image_distance: float
    magnification: float
    nature: ImageNature
    orientation: Orientation
    focal_length: float
    case: ImagingCase

    @property
    def is_unbounded(self) -> bool:
        """True when the image forms at infinity."""
        return self.case is ImagingCase.AT_FOCUS

    @property
    def is_real(self) -> bool:
        return self.nature is ImageNature.REAL

    @property
    def description(self) -> str:
        """Human readable summary derived from the image nature."""
        return _DESCRIPTIONS[self.nature]

    def image_height(self, object_height: float) -> float:
        """Signed image height for an object of the given height."""
        if self.is_unbounded:
            return math.inf
        return self.magnification * object_height


def thin_lens_image_distance(p: float, f: float, eps: float = FOCAL_EPSILON) -> float:
    """Solve 1/p + 1/q = 1/f for q.

    Args:
        p: Object distance.
        f: Signed focal length.
        eps: Distance from the focal plane below which the image is taken
            to be at infinity instead of a huge finite number.

    Returns:
        Image distance q, or ``math.inf`` when |p - f| < eps.
    """
    if abs(p - f) < eps:
        return math.inf
    return p * f / (p - f)


def solve_single_optic(optic: SingleOptic) -> ImagingResult:
    """Locate and classify the image formed by a single lens or mirror.

    Args:
        optic: Single optic configuration.

    Returns:
        ImagingResult. Callers must check ``is_unbounded`` before using
        the numeric distance or magnification.

    Example:
        >>> res = solve_single_optic(SingleOptic(object_distance=200, focal_length=100))
        >>> res.image_distance, res.magnification
        (200.0, -1.0)
    """
    p = float(optic.object_distance)
    f = optic.signed_focal_length

    if optic.is_plane_mirror:
        return ImagingResult(
            image_distance=-p,
            magnification=1.0,
            nature=ImageNature.VIRTUAL,
            orientation=Orientation.UPRIGHT,
            focal_length=f,
            case=ImagingCase.PLANE_MIRROR,
        )

    q = thin_lens_image_distance(p, f)
    if math.isinf(q):
        m = math.inf
        case = ImagingCase.AT_FOCUS
    else:
        m = -q / p
        case = ImagingCase.FINITE

    # q > 0 is real for both lenses and mirrors in this convention.
    nature = ImageNature.REAL if q > 0 else ImageNature.VIRTUAL
    orientation = Orientation.INVERTED if m < 0 else Orientation.UPRIGHT

    return ImagingResult(
        image_distance=q,
        magnification=m,
        nature=nature,
        orientation=orientation,
        focal_length=f,
        case=case,
    )


def solve_slab_shift(slab: Slab) -> float:
    """Apparent-depth shift of an object viewed through a slab.

    shift = t * (1 - 1/n)

    This is the first-order, normal-incidence result. It is only exact
    for rays close to the slab normal and is not a general ray-trace
    through the slab (see ``rays.trace_slab`` for the angled trace).

    Args:
        slab: Slab thickness and refractive index.

    Returns:
        Shift of the apparent object position towards the viewer.
    """
    return slab.thickness * (1.0 - 1.0 / slab.index)
