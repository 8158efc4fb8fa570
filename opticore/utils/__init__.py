"""Shared math and validation utilities."""

from .angles import (
    to_radians,
    to_degrees,
    snell_sine,
    refract,
    critical_angle,
)
from .validation import coerce_enum

__all__ = [
    # Angles
    "to_radians",
    "to_degrees",
    "snell_sine",
    "refract",
    "critical_angle",
    # Validation
    "coerce_enum",
]
