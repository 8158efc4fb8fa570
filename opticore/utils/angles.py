"""Angle conversion and refraction helpers.

All internal math is radian-based. Degrees only appear at the public API
edge, where these helpers convert explicitly.
"""

import math
from typing import Optional

__all__ = ["to_radians", "to_degrees", "snell_sine", "refract", "critical_angle"]


def to_radians(angle_deg: float) -> float:
    """Convert degrees to radians."""
    return angle_deg * math.pi / 180.0


def to_degrees(angle_rad: float) -> float:
    """Convert radians to degrees."""
    return angle_rad * 180.0 / math.pi


def snell_sine(n_from: float, n_to: float, theta: float) -> float:
    """Sine of the refraction angle from Snell's law.

    n_from * sin(θ_in) = n_to * sin(θ_out)

    Args:
        n_from: Refractive index of the incident medium.
        n_to: Refractive index of the transmitting medium.
        theta: Incidence angle (radians).

    Returns:
        sin(θ_out). Values with magnitude above 1 mean the ray cannot
        cross the interface.
    """
    return (n_from / n_to) * math.sin(theta)


def refract(n_from: float, n_to: float, theta: float) -> Optional[float]:
    """Refraction angle in radians, or None on total internal reflection."""
    s = snell_sine(n_from, n_to, theta)
    if abs(s) > 1.0:
        return None
    return math.asin(s)


def critical_angle(n_from: float, n_to: float) -> Optional[float]:
    """Critical angle (radians) going from n_from into n_to.

    Only defined when light moves into a lower-index medium
    (n_from > n_to); returns None otherwise.
    """
    if n_from <= n_to:
        return None
    return math.asin(n_to / n_from)
