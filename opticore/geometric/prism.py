"""Refraction through a triangular prism.

Theory:
    Entry face:  n1 sin(θ1) = n2 sin(θ2)
    Geometry:    θ2 + θ3 = A
    Exit face:   n2 sin(θ3) = n1 sin(θ4)
    Deviation:   δ = θ1 + θ4 - A

Total internal reflection can stop the ray at either face. The two
cases are reported separately; no deviation is produced for them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..utils.angles import critical_angle, refract, to_degrees, to_radians
from .optics import Prism

__all__ = ["RefractionStage", "PrismResult", "solve_prism"]


class RefractionStage(str, Enum):
    """How far the ray got through the prism."""

    COMPLETE = "complete"
    ENTRY = "entry"
    EXIT = "exit"


@dataclass(frozen=True)
class PrismResult:
    """Ray angles through a prism, all in degrees.

    Fields that could not be computed because of total internal
    reflection are None.

    Attributes:
        theta1: Incidence angle on the entry face.
        theta2: Refraction angle inside the prism at the entry face.
        theta3: Incidence angle on the exit face (inside the prism).
        theta4: Refraction angle leaving the exit face.
        deviation: Total angular deviation δ.
        stage: COMPLETE, or the face where TIR occurred.
        critical_angle: Critical angle of the prism/environment interface,
            None when n_prism <= n_env.
    """

    theta1: float
    theta2: Optional[float]
    theta3: Optional[float]
    theta4: Optional[float]
    deviation: Optional[float]
    stage: RefractionStage
    critical_angle: Optional[float]

    @property
    def is_tir(self) -> bool:
        """True if the ray was totally internally reflected at any face."""
        return self.stage is not RefractionStage.COMPLETE


def solve_prism(prism: Prism) -> PrismResult:
    """Trace a ray through both faces of a prism.

    Args:
        prism: Prism configuration (angles in degrees).

    Returns:
        PrismResult. Check ``is_tir``/``stage`` before using ``theta4`` or
        ``deviation``.

    Example:
        >>> res = solve_prism(Prism(n_env=1.0, n_prism=1.5, apex_angle=60, incident_angle=45))
        >>> round(res.deviation, 1)
        37.4
    """
    n1 = prism.n_env
    n2 = prism.n_prism

    crit = critical_angle(n2, n1)
    crit_deg = None if crit is None else to_degrees(crit)

    theta1 = to_radians(prism.incident_angle)
    apex = to_radians(prism.apex_angle)

    theta2 = refract(n1, n2, theta1)
    if theta2 is None:
        return PrismResult(
            theta1=prism.incident_angle,
            theta2=None,
            theta3=None,
            theta4=None,
            deviation=None,
            stage=RefractionStage.ENTRY,
            critical_angle=crit_deg,
        )

    theta3 = apex - theta2

    theta4 = refract(n2, n1, theta3)
    if theta4 is None:
        return PrismResult(
            theta1=prism.incident_angle,
            theta2=to_degrees(theta2),
            theta3=to_degrees(theta3),
            theta4=None,
            deviation=None,
            stage=RefractionStage.EXIT,
            critical_angle=crit_deg,
        )

    deviation = theta1 + theta4 - apex

    return PrismResult(
        theta1=prism.incident_angle,
        theta2=to_degrees(theta2),
        theta3=to_degrees(theta3),
        theta4=to_degrees(theta4),
        deviation=to_degrees(deviation),
        stage=RefractionStage.COMPLETE,
        critical_angle=crit_deg,
    )
