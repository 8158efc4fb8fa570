"""Optical system configuration data structures.

All inputs are immutable. A new instance is built for every change of
parameters and handed to the pure solver functions.

Distances share one unit of length (the interactive lab uses screen
units, where a focal length of 100 is typical). Angles are in degrees.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..utils.validation import coerce_enum

__all__ = [
    "OpticKind",
    "OpticShape",
    "SingleOptic",
    "TwoLensSystem",
    "Slab",
    "Prism",
]


class OpticKind(str, Enum):
    """Type of a single optical element."""

    LENS = "lens"
    MIRROR = "mirror"


class OpticShape(str, Enum):
    """Curvature class of a single optical element.

    CONVERGING is a convex lens or concave mirror, DIVERGING a concave
    lens or convex mirror. PLANE is only meaningful for mirrors.
    """

    CONVERGING = "converging"
    DIVERGING = "diverging"
    PLANE = "plane"


@dataclass(frozen=True)
class SingleOptic:
    """A single thin lens or mirror with an object in front of it.

    Attributes:
        object_distance: Distance from the optic to the object (> 0).
        focal_length: Focal length magnitude (> 0). The sign is taken
            from ``shape``. Ignored for plane mirrors.
        kind: Lens or mirror.
        shape: Converging, diverging or plane.
        object_height: Signed object height, used for ray tracing only.

    Example:
        ```python
        optic = SingleOptic(object_distance=200, focal_length=100)
        print(optic.signed_focal_length)  # 100.0
        ```
    """

    object_distance: float
    focal_length: float = 100.0
    kind: Union[OpticKind, str] = OpticKind.LENS
    shape: Union[OpticShape, str] = OpticShape.CONVERGING
    object_height: float = 60.0

    def __post_init__(self) -> None:
        """Coerce enum fields and validate."""
        object.__setattr__(self, "kind", coerce_enum(OpticKind, self.kind))
        object.__setattr__(self, "shape", coerce_enum(OpticShape, self.shape))

        if self.object_distance <= 0:
            raise ValueError(
                f"Object distance must be positive, got {self.object_distance}"
            )
        if self.shape is OpticShape.PLANE and self.kind is not OpticKind.MIRROR:
            raise ValueError("Plane shape is only valid for mirrors")
        if self.shape is not OpticShape.PLANE and self.focal_length <= 0:
            raise ValueError(
                f"Focal length magnitude must be positive, got {self.focal_length}"
            )

    @property
    def signed_focal_length(self) -> float:
        """Focal length with sign convention applied.

        Positive for converging lenses and concave mirrors, negative for
        diverging lenses and convex mirrors, infinite for plane mirrors.
        """
        if self.shape is OpticShape.PLANE:
            return math.inf
        if self.shape is OpticShape.CONVERGING:
            return float(self.focal_length)
        return -float(self.focal_length)

    @property
    def is_plane_mirror(self) -> bool:
        return self.shape is OpticShape.PLANE


@dataclass(frozen=True)
class TwoLensSystem:
    """Two thin lenses on a common axis.

    Lens 1 sits at position 0, lens 2 at ``separation``. The object is
    ``object_distance`` in front of lens 1.

    Attributes:
        object_distance: Object distance from lens 1 (> 0).
        f1: Signed focal length of lens 1 (non-zero).
        f2: Signed focal length of lens 2 (non-zero).
        separation: Distance between the lenses (> 0).
        object_height: Signed object height, used for ray tracing only.
    """

    object_distance: float
    f1: float = 100.0
    f2: float = 100.0
    separation: float = 300.0
    object_height: float = 60.0

    def __post_init__(self) -> None:
        if self.object_distance <= 0:
            raise ValueError(
                f"Object distance must be positive, got {self.object_distance}"
            )
        if self.f1 == 0 or self.f2 == 0:
            raise ValueError(
                f"Focal lengths must be non-zero, got f1={self.f1}, f2={self.f2}"
            )
        if self.separation <= 0:
            raise ValueError(
                f"Lens separation must be positive, got {self.separation}"
            )


@dataclass(frozen=True)
class Slab:
    """Plane-parallel slab of transparent material.

    Attributes:
        thickness: Slab thickness (> 0).
        index: Refractive index of the slab relative to its surroundings.
    """

    thickness: float = 150.0
    index: float = 1.5

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError(f"Slab thickness must be positive, got {self.thickness}")
        if self.index <= 0:
            raise ValueError(f"Refractive index must be positive, got {self.index}")


@dataclass(frozen=True)
class Prism:
    """Triangular prism in a surrounding medium.

    All angles are in degrees.

    Attributes:
        n_env: Refractive index of the environment (air=1.0, water=1.333).
        n_prism: Refractive index of the prism (crown glass ~1.5).
        apex_angle: Apex angle A, strictly between 0 and 180.
        incident_angle: Angle of incidence on the first face, measured
            from the face normal, in [-90, 90].

    Example:
        ```python
        prism = Prism(n_env=1.0, n_prism=1.5, apex_angle=60, incident_angle=45)
        ```
    """

    n_env: float = 1.0
    n_prism: float = 1.5
    apex_angle: float = 60.0
    incident_angle: float = 45.0

    def __post_init__(self) -> None:
        if self.n_env <= 0 or self.n_prism <= 0:
            raise ValueError(
                f"Refractive indices must be positive, got n_env={self.n_env}, "
                f"n_prism={self.n_prism}"
            )
        if not 0 < self.apex_angle < 180:
            raise ValueError(
                f"Apex angle must be in (0, 180) degrees, got {self.apex_angle}"
            )
        if not -90 <= self.incident_angle <= 90:
            raise ValueError(
                f"Incident angle must be in [-90, 90] degrees, got {self.incident_angle}"
            )
