"""Principal-ray geometry for ray diagrams.

Produces straight line segments in diagram coordinates: the optic (or
lens 1) sits at x = 0, the object at x = -p, with height y measured from
the optical axis. Light travels in +x. Segments that are extensions of
real rays (used to locate virtual images and foci) are flagged virtual.
"""

import math
from dataclasses import dataclass
from typing import List

from ..utils.angles import refract
from .imaging import solve_single_optic
from .optics import OpticKind, OpticShape, Slab, SingleOptic, TwoLensSystem

__all__ = [
    "DEFAULT_VIEW_LIMIT",
    "RaySegment",
    "trace_single_optic",
    "trace_two_lens",
    "trace_slab",
]

# Half-width of the diagram; rays are extended to this x coordinate.
DEFAULT_VIEW_LIMIT = 800.0


@dataclass(frozen=True)
class RaySegment:
    """Straight piece of a traced ray.

    Attributes:
        x1, y1: Start point.
        x2, y2: End point.
        ray: Index of the principal ray this segment belongs to (1-based).
        virtual: True for construction lines that light does not travel
            along.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    ray: int
    virtual: bool = False

    @property
    def slope(self) -> float:
        dx = self.x2 - self.x1
        if dx == 0:
            return math.inf
        return (self.y2 - self.y1) / dx


def _trace_diverging_lens(
    obj_x: float, obj_y: float, f_mag: float, view: float
) -> List[RaySegment]:
    segs = []

    # Ray 1: parallel to axis, diverges as if from the near focal point
    segs.append(RaySegment(obj_x, obj_y, 0.0, obj_y, ray=1))
    slope1 = obj_y / f_mag
    segs.append(RaySegment(0.0, obj_y, view, obj_y + slope1 * view, ray=1))
    segs.append(RaySegment(-f_mag, 0.0, 0.0, obj_y, ray=1, virtual=True))

    # Ray 2: through the centre, undeviated
    slope2 = obj_y / obj_x
    segs.append(RaySegment(obj_x, obj_y, view, slope2 * view, ray=2))

    # Ray 3: aimed at the far focal point, leaves parallel to the axis
    slope3 = -obj_y / (f_mag - obj_x)
    hit_y = obj_y + slope3 * (0.0 - obj_x)
    segs.append(RaySegment(obj_x, obj_y, 0.0, hit_y, ray=3))
    segs.append(RaySegment(0.0, hit_y, f_mag, 0.0, ray=3, virtual=True))
    segs.append(RaySegment(0.0, hit_y, view, hit_y, ray=3))
    segs.append(RaySegment(-view, hit_y, 0.0, hit_y, ray=3, virtual=True))

    return segs


def trace_single_optic(
    optic: SingleOptic, view_limit: float = DEFAULT_VIEW_LIMIT
) -> List[RaySegment]:
    """Principal rays for a single lens or mirror.

    Lenses transmit light towards +x, mirrors reflect it back towards -x.

    Args:
        optic: Single optic configuration (uses ``object_height``).
        view_limit: x extent rays are drawn to.

    Returns:
        List of segments, grouped by principal ray.
    """
    obj_x = -float(optic.object_distance)
    obj_y = float(optic.object_height)
    view = float(view_limit)
    f = optic.signed_focal_length
    is_lens = optic.kind is OpticKind.LENS

    if is_lens and optic.shape is OpticShape.DIVERGING:
        return _trace_diverging_lens(obj_x, obj_y, abs(f), view)

    segs = []

    # Ray 1: parallel to axis, then through (or from) the focal point
    segs.append(RaySegment(obj_x, obj_y, 0.0, obj_y, ray=1))
    if optic.shape is OpticShape.PLANE:
        segs.append(RaySegment(0.0, obj_y, -view, obj_y, ray=1))
    else:
        direction = 1.0 if is_lens else -1.0
        # Outgoing ray crosses the axis at x = direction * f
        slope = -obj_y / (direction * f)
        exit_x = direction * view
        segs.append(RaySegment(0.0, obj_y, exit_x, obj_y + slope * exit_x, ray=1))
        if not is_lens:
            back_x = -exit_x
            segs.append(
                RaySegment(0.0, obj_y, back_x, obj_y + slope * back_x, ray=1, virtual=True)
            )

    # Ray 2: through the lens centre or off the mirror vertex
    if is_lens:
        slope = obj_y / obj_x
        segs.append(RaySegment(obj_x, obj_y, view, slope * view, ray=2))
        q = solve_single_optic(optic).image_distance
        if q < 0 and math.isfinite(q):
            segs.append(RaySegment(0.0, 0.0, -view, -slope * view, ray=2, virtual=True))
    else:
        # Angle of incidence equals angle of reflection at the vertex
        slope = -(obj_y / obj_x)
        segs.append(RaySegment(obj_x, obj_y, 0.0, 0.0, ray=2))
        segs.append(RaySegment(0.0, 0.0, -view, -slope * view, ray=2))
        segs.append(RaySegment(0.0, 0.0, view, slope * view, ray=2, virtual=True))

    return segs


def trace_two_lens(
    system: TwoLensSystem, view_limit: float = DEFAULT_VIEW_LIMIT
) -> List[RaySegment]:
    """Parallel ray and chief ray through a two-lens system.

    Each thin lens changes a ray slope by m' = m - y/f, where y is the
    height at which the ray crosses the lens.

    Args:
        system: Two-lens configuration (uses ``object_height``).
        view_limit: x extent rays are drawn to.

    Returns:
        List of segments for the two rays.
    """
    obj_x = -float(system.object_distance)
    obj_y = float(system.object_height)
    sep = float(system.separation)
    view = max(float(view_limit), sep)
    segs = []

    # Ray 1: parallel to axis
    segs.append(RaySegment(obj_x, obj_y, 0.0, obj_y, ray=1))
    m1 = -obj_y / system.f1
    hit_y2 = obj_y + m1 * sep
    segs.append(RaySegment(0.0, obj_y, sep, hit_y2, ray=1))
    m2 = m1 - hit_y2 / system.f2
    segs.append(RaySegment(sep, hit_y2, view, hit_y2 + m2 * (view - sep), ray=1))

    # Ray 2: chief ray through the centre of lens 1
    mc1 = obj_y / obj_x
    hit_c = mc1 * sep
    segs.append(RaySegment(obj_x, obj_y, sep, hit_c, ray=2))
    mc2 = mc1 - hit_c / system.f2
    segs.append(RaySegment(sep, hit_c, view, hit_c + mc2 * (view - sep), ray=2))

    return segs


def trace_slab(
    slab: Slab,
    object_distance: float,
    object_height: float,
    hit_height: float = 20.0,
    view_limit: float = DEFAULT_VIEW_LIMIT,
) -> List[RaySegment]:
    """Angled ray through a plane-parallel slab centred on x = 0.

    The ray leaves the object, strikes the first face at ``hit_height``,
    refracts inside the slab and exits parallel to its original
    direction, displaced sideways. The undeviated continuation of the
    incident ray is returned as a virtual segment.

    This is an exact trace at a single angle; it is independent of the
    normal-incidence ``solve_slab_shift`` approximation.

    Args:
        slab: Slab thickness and index.
        object_distance: Object distance from the slab centre. Must lie
            outside the slab.
        object_height: Object height above the axis.
        hit_height: Height at which the ray strikes the first face.
        view_limit: x extent rays are drawn to.

    Returns:
        Incident, internal and exit segments plus the virtual trace.
    """
    half = slab.thickness / 2.0
    if object_distance <= half:
        raise ValueError(
            f"Object distance ({object_distance}) must be outside the slab "
            f"(> {half})"
        )

    start_x = -float(object_distance)
    start_y = float(object_height)
    face1_x = -half
    face2_x = half
    view = float(view_limit)

    slope_in = (hit_height - start_y) / (face1_x - start_x)
    theta1 = math.atan(slope_in)
    theta2 = refract(1.0, slab.index, theta1)
    if theta2 is None:
        # Only possible for slabs optically thinner than their surroundings
        return [
            RaySegment(start_x, start_y, face1_x, hit_height, ray=1),
            RaySegment(
                face1_x, hit_height, -view, hit_height - slope_in * (-view - face1_x), ray=1
            ),
        ]
    slope_inside = math.tan(theta2)
    exit_y = hit_height + slope_inside * (face2_x - face1_x)

    return [
        RaySegment(start_x, start_y, face1_x, hit_height, ray=1),
        RaySegment(face1_x, hit_height, face2_x, exit_y, ray=1),
        RaySegment(face2_x, exit_y, view, exit_y + slope_in * (view - face2_x), ray=1),
        RaySegment(
            face1_x,
            hit_height,
            view,
            hit_height + slope_in * (view - face1_x),
            ray=1,
            virtual=True,
        ),
    ]
